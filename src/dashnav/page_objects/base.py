"""Base page object shared by the dashboard helpers."""

import re
from collections.abc import Mapping

import structlog
from playwright.sync_api import Locator, Page

from dashnav.config.settings import Settings, get_settings
from dashnav.constants.navigation import PAGES
from dashnav.core.exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    VerificationTimeoutError,
)
from dashnav.models.navigation import PageDescriptor
from dashnav.support.wait import wait_for_condition

log = structlog.get_logger(__name__)


def text_pattern(label: str) -> re.Pattern[str]:
    """Case-sensitive substring match on an element's text."""
    return re.compile(re.escape(label))


class PageHelper:
    """Common plumbing for dashboard page objects.

    Every lookup is polled explicitly against the configured timeout, so a
    missing element surfaces as :class:`ElementNotFoundError` naming the
    menu path being checked.
    """

    pages: Mapping[str, PageDescriptor] = PAGES

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        self.page = page
        self.settings = settings or get_settings()

    def navigate_to(self, name: str = "index") -> None:
        """Open a page from the page table and wait for its marker."""
        try:
            descriptor = self.pages[name]
        except KeyError as e:
            raise ConfigurationError(f"Unknown page: {name!r}") from e

        url = f"{self.settings.base_url}/{descriptor.url}"
        log.info("navigating", page=name, url=url)
        self.page.goto(url)
        self.expect_element(descriptor.id, path=(name,))

    def wait_for_element(
        self,
        locator: Locator,
        path: tuple[str, ...] = (),
        selector: str | None = None,
    ) -> Locator:
        """Poll until ``locator`` matches at least once; return the first match.

        Raises:
            ElementNotFoundError: If nothing matched within the timeout.
        """
        try:
            wait_for_condition(
                action=locator.count,
                condition=lambda n: n > 0,
                timeout_seconds=self.settings.default_timeout_seconds,
                poll_interval_seconds=self.settings.poll_interval_seconds,
                error_message="Element did not appear",
                path=path,
                selector=selector,
            )
        except VerificationTimeoutError as e:
            raise ElementNotFoundError(
                f"{selector or 'element'} not found within "
                f"{self.settings.default_timeout_ms}ms",
                path=path,
                selector=selector,
            ) from e
        return locator.first

    def expect_element(self, selector: str, path: tuple[str, ...] = ()) -> Locator:
        """Assert that an element matching ``selector`` exists in the DOM."""
        return self.wait_for_element(
            self.page.locator(selector), path=path, selector=selector
        )

    def click(
        self,
        locator: Locator,
        path: tuple[str, ...] = (),
        selector: str | None = None,
    ) -> None:
        target = self.wait_for_element(locator, path=path, selector=selector)
        target.click(timeout=self.settings.default_timeout_ms)
        log.debug("clicked", path=path, selector=selector)
