"""Playwright E2E test fixtures for the navigation page objects.

This module provides fixtures for:
- Browser and context setup
- A static dashboard stand-in served through ``page.route``
- Recording of status requests that escaped the stubs

Usage:
    @pytest.mark.e2e
    def test_sidebar(navigation):
        navigation.check_navigations(navigation.navigations)

Run with:
    playwright install chromium
    pytest -m e2e            # Headless mode
    pytest -m e2e --headed   # Visual mode
"""

import os
import re
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from playwright.sync_api import Page, Route

from dashnav.config.settings import Settings
from dashnav.page_objects.navigation import NavigationPageHelper

# =============================================================================
# Configuration
# =============================================================================

DASHBOARD_URL = "http://dashnav.test"
DASHBOARD_HTML = Path(__file__).parent / "fixtures" / "dashboard.html"

# Timeouts (in milliseconds)
DEFAULT_TIMEOUT = 5_000
NAVIGATION_TIMEOUT = 15_000


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for dashboard testing."""
    return {
        **browser_context_args,
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "slow_mo": int(os.environ.get("SLOW_MO", "0")),
    }


# =============================================================================
# Dashboard Fixtures
# =============================================================================


@pytest.fixture
def e2e_settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        base_url=DASHBOARD_URL,
        default_timeout_ms=DEFAULT_TIMEOUT,
        poll_interval_ms=50,
    )


@pytest.fixture
def unstubbed_requests() -> list[str]:
    """Backend URLs the stand-in answered itself, i.e. that no stub caught."""
    return []


@pytest.fixture
def dashboard_page(page: Page, unstubbed_requests: list[str]) -> Generator[Page, None, None]:
    """Serve the dashboard stand-in for every request to DASHBOARD_URL.

    Backend calls reaching this route answer 503, as a dashboard without
    its services would.
    """
    html = DASHBOARD_HTML.read_text(encoding="utf-8")

    def serve(route: Route) -> None:
        url = route.request.url
        if "/ui-api/" in url:
            unstubbed_requests.append(url)
            route.fulfill(status=503, json={"detail": "service unavailable"})
        else:
            route.fulfill(status=200, content_type="text/html", body=html)

    page.set_default_timeout(DEFAULT_TIMEOUT)
    page.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
    page.route(re.compile("^" + re.escape(DASHBOARD_URL) + "/"), serve)

    yield page


@pytest.fixture
def navigation(dashboard_page: Page, e2e_settings: Settings) -> NavigationPageHelper:
    """Navigation page object opened on the dashboard index."""
    helper = NavigationPageHelper(dashboard_page, settings=e2e_settings)
    helper.navigate_to()
    return helper
