"""Shared pytest fixtures for dashnav tests.

This module provides fixtures for:
- Test environment variables with automatic restore
- Fast-polling settings for unit tests
- An in-memory dashboard page standing in for Playwright's ``Page``
- Navigation record factories

Usage:
    @pytest.mark.unit
    def test_something(fake_page, fast_settings):
        nav = NavigationPageHelper(fake_page, settings=fast_settings)
        nav.check_navigations()
"""

import os
from collections.abc import Generator

import pytest

from dashnav.config.settings import Settings, get_settings
from dashnav.constants.navigation import NAVIGATIONS
from tests.support.factories.navigation_factory import (
    NavBranchRecordFactory,
    NavLeafRecordFactory,
)
from tests.support.helpers.fake_page import FakePage

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("DASHNAV_BASE_URL", "http://dashnav.test")
    os.environ.setdefault("DASHNAV_LOG_LEVEL", "DEBUG")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def fast_settings() -> Settings:
    """Settings with short timeouts so failing lookups fail quickly."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        base_url="http://dashnav.test",
        default_timeout_ms=50,
        poll_interval_ms=10,
    )


# =============================================================================
# Page Fixtures
# =============================================================================


@pytest.fixture
def fake_page() -> FakePage:
    """In-memory dashboard rendering the shipped navigation tree."""
    return FakePage.from_navigations(NAVIGATIONS)


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def leaf_record_factory() -> type[NavLeafRecordFactory]:
    """Provide factory for raw leaf navigation records."""
    return NavLeafRecordFactory


@pytest.fixture
def branch_record_factory() -> type[NavBranchRecordFactory]:
    """Provide factory for raw branch navigation records."""
    return NavBranchRecordFactory
