"""Sidebar navigation page object.

Walks the dashboard's vertical menu, clicking each entry and checking that
the screen it points at renders.

Example:
    nav = NavigationPageHelper(page)
    nav.navigate_to()
    visited = nav.check_navigations(nav.navigations)
"""

from collections.abc import Iterable
from typing import Any

import structlog
from playwright.sync_api import Locator, Page

from dashnav.config.settings import Settings
from dashnav.constants import selectors
from dashnav.constants.navigation import NAVIGATIONS
from dashnav.intercepts import (
    RouteHandle,
    clear_intercepts,
    register_status_intercepts,
)
from dashnav.models.navigation import (
    NavBranch,
    NavLeaf,
    VisitedEntry,
    parse_navigations,
)
from dashnav.page_objects.base import PageHelper, text_pattern
from dashnav.support.wait import wait_for_condition

log = structlog.get_logger(__name__)


class NavigationPageHelper(PageHelper):
    """Page object for the vertical navigation menu."""

    navigations: tuple[NavLeaf | NavBranch, ...] = NAVIGATIONS

    def __init__(
        self,
        page: Page,
        settings: Settings | None = None,
        verify_submenu_components: bool | None = None,
    ) -> None:
        super().__init__(page, settings)
        if verify_submenu_components is None:
            verify_submenu_components = self.settings.verify_submenu_components
        self.verify_submenu_components = verify_submenu_components
        self._intercepts: list[RouteHandle] = []

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    def get_vertical_menu(self) -> Locator:
        return self.page.locator(selectors.SIDEBAR)

    def get_menu_toggler(self) -> Locator:
        return self.page.locator(selectors.SIDEBAR_TOGGLER)

    # -------------------------------------------------------------------------
    # Sidebar visibility
    # -------------------------------------------------------------------------

    def toggle_sidebar(self) -> None:
        self.click(
            self.get_menu_toggler(),
            path=("sidebar toggler",),
            selector=selectors.SIDEBAR_TOGGLER,
        )

    def is_sidebar_collapsed(self) -> bool:
        """Whether the sidebar carries the collapsed class.

        Raises:
            ElementNotFoundError: If the sidebar is not on the page.
        """
        sidebar = self.wait_for_element(
            self.get_vertical_menu(), path=("sidebar",), selector=selectors.SIDEBAR
        )
        classes = (
            sidebar.get_attribute("class", timeout=self.settings.default_timeout_ms)
            or ""
        )
        return selectors.SIDEBAR_COLLAPSED_CLASS in classes.split()

    def expect_sidebar_collapsed(self, collapsed: bool = True) -> None:
        """Wait for the sidebar to reach the given collapsed state.

        Raises:
            ElementNotFoundError: If the sidebar is not on the page.
            VerificationTimeoutError: If the state is not reached in time.
        """
        wait_for_condition(
            action=self.is_sidebar_collapsed,
            condition=lambda state: state is collapsed,
            timeout_seconds=self.settings.default_timeout_seconds,
            poll_interval_seconds=self.settings.poll_interval_seconds,
            error_message=f"Sidebar collapsed state never became {collapsed}",
            path=("sidebar",),
            selector=selectors.SIDEBAR,
        )

    # -------------------------------------------------------------------------
    # Navigation walk
    # -------------------------------------------------------------------------

    def check_navigations(
        self, navs: Iterable[Any] | None = None
    ) -> tuple[VisitedEntry, ...]:
        """Click every menu entry in order and check the screen it opens.

        The status endpoints are stubbed before the first click. Leaf entries
        must render their component; branch entries hand over to
        :meth:`check_nav_submenu`. The walk stops at the first failure.

        Args:
            navs: Typed entries or raw ``{"menu", "component"|"submenus"}``
                records. Defaults to :attr:`navigations`.

        Returns:
            One record per click, in click order.

        Raises:
            NavigationConfigError: If a record is malformed.
            ElementNotFoundError: If a menu link or component never appeared.
        """
        entries = parse_navigations(self.navigations if navs is None else navs)

        self.clear_intercepts()
        self._intercepts = register_status_intercepts(
            self.page, self.settings.fixtures_dir
        )

        if not self.verify_submenu_components and any(
            isinstance(e, NavBranch) for e in entries
        ):
            log.warning(
                "submenu_component_not_verified",
                hint="set DASHNAV_VERIFY_SUBMENU_COMPONENTS=true to assert them",
            )

        log.info("navigation_walk_started", entries=len(entries))
        visited: list[VisitedEntry] = []

        for nav in entries:
            self.click(
                self.page.locator(selectors.MENU_LINK).filter(
                    has_text=text_pattern(nav.menu)
                ),
                path=(nav.menu,),
                selector=selectors.MENU_LINK,
            )
            if isinstance(nav, NavBranch):
                visited.extend(self.check_nav_submenu(nav.menu, nav.submenus))
            else:
                self.expect_element(nav.component, path=(nav.menu,))
                log.debug("component_verified", menu=nav.menu, component=nav.component)
                visited.append(
                    VisitedEntry(path=(nav.menu,), component=nav.component, verified=True)
                )

        log.info("navigation_walk_completed", visited=len(visited))
        return tuple(visited)

    def check_nav_submenu(
        self, menu: str, submenu: Iterable[Any]
    ) -> list[VisitedEntry]:
        """Click each submenu link inside the list item of its parent menu."""
        visited: list[VisitedEntry] = []

        for nav in parse_navigations(submenu):
            path = (menu, nav.menu)
            scope = (
                self.page.locator(selectors.MENU_ITEM)
                .filter(has_text=text_pattern(menu))
                .first
            )
            self.click(
                scope.locator(selectors.SUBMENU_LINK).filter(
                    has_text=text_pattern(nav.menu)
                ),
                path=path,
                selector=selectors.SUBMENU_LINK,
            )

            if isinstance(nav, NavBranch):
                # Deeper levels are clicked, not walked
                visited.append(VisitedEntry(path=path))
            elif self.verify_submenu_components:
                self.expect_element(nav.component, path=path)
                log.debug("component_verified", menu=path, component=nav.component)
                visited.append(
                    VisitedEntry(path=path, component=nav.component, verified=True)
                )
            else:
                visited.append(VisitedEntry(path=path, component=nav.component))

        return visited

    def clear_intercepts(self) -> None:
        """Drop the status stubs installed by the last walk."""
        if self._intercepts:
            clear_intercepts(self.page, self._intercepts)
            self._intercepts = []
