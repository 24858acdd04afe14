"""Support utilities for page objects."""

from dashnav.support.wait import wait_for_condition

__all__ = ["wait_for_condition"]
