"""
Page Objects

Page Object Model (POM) for the dashboard.
Encapsulates page interactions and locators.

Usage:
    from dashnav.page_objects import NavigationPageHelper

    nav = NavigationPageHelper(page)
    nav.navigate_to()
    nav.check_navigations(nav.navigations)

Pattern:
    - One class per page/major component
    - Methods for actions (click, toggle)
    - get_* methods for locators
    - Assertions as check_*/expect_* methods
"""

from dashnav.page_objects.base import PageHelper
from dashnav.page_objects.navigation import NavigationPageHelper

__all__ = ["NavigationPageHelper", "PageHelper"]
