"""
Test Helpers

Test doubles and pure functions for common test operations.

Usage:
    from tests.support.helpers import FakePage
"""

from tests.support.helpers.fake_page import FakeLocator, FakePage

__all__ = ["FakeLocator", "FakePage"]
