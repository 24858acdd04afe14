"""
Wait Helpers

Bounded polling around DOM lookups and assertions.
Inspired by Cypress retry-until-timeout semantics.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from dashnav.core.exceptions import VerificationTimeoutError

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.1,
    error_message: str = "Condition not met within timeout",
    path: tuple[str, ...] = (),
    selector: str | None = None,
) -> T:
    """
    Poll an action until condition is met.

    The action always runs at least once, even with a zero timeout.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error
        path: Menu path reported on timeout
        selector: Selector reported on timeout

    Returns:
        The result of action() when condition is met

    Raises:
        VerificationTimeoutError: If condition not met within timeout

    Example:
        count = wait_for_condition(
            action=lambda: page.locator("cd-hosts").count(),
            condition=lambda n: n > 0,
            timeout_seconds=5.0,
        )
    """
    deadline = time.monotonic() + timeout_seconds

    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        time.sleep(min(poll_interval_seconds, remaining))

    raise VerificationTimeoutError(
        f"{error_message}. Last result: {last_result}",
        path=path,
        selector=selector,
    )
