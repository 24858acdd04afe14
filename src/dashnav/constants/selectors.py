"""DOM contract of the dashboard sidebar."""

from typing import Final

SIDEBAR: Final[str] = "nav[id=sidebar]"
SIDEBAR_TOGGLER: Final[str] = '[aria-label="toggle sidebar visibility"]'

# Class the sidebar carries while collapsed
SIDEBAR_COLLAPSED_CLASS: Final[str] = "active"

MENU_ITEM: Final[str] = ".simplebar-content li.nav-item"
MENU_LINK: Final[str] = f"{MENU_ITEM} a"
SUBMENU_LINK: Final[str] = "ul.list-unstyled li a"
