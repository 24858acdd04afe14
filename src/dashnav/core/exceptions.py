"""dashnav exception hierarchy.

This module defines the base exception class and specialized exceptions
for the different ways a navigation walk can fail.
"""


class DashNavError(Exception):
    """Base exception for all dashnav errors.

    All custom exceptions in dashnav should inherit from this class
    so callers can catch every helper failure in one place.
    """

    pass


class ConfigurationError(DashNavError):
    """Raised when configuration is invalid or missing.

    Use this for bad settings values or fixture files that cannot be read.

    Example:
        raise ConfigurationError("Fixture not found: rgw-status.json")
    """

    pass


class NavigationConfigError(DashNavError):
    """Raised when a navigation record is malformed.

    A record must carry a non-empty ``menu`` label and exactly one of
    ``component`` or ``submenus``.

    Example:
        raise NavigationConfigError("'Pools' has both component and submenus")
    """

    pass


class VerificationError(DashNavError):
    """Raised when a step of a navigation walk fails.

    Attributes:
        path: Menu labels leading to the failing entry, outermost first.
        selector: Selector that could not be satisfied, if any.
    """

    def __init__(
        self,
        message: str,
        path: tuple[str, ...] = (),
        selector: str | None = None,
    ) -> None:
        self.path = path
        self.selector = selector
        if path:
            message = f"{' > '.join(path)}: {message}"
        super().__init__(message)


class ElementNotFoundError(VerificationError):
    """Raised when a click target or component marker never appeared.

    Example:
        raise ElementNotFoundError(
            "component not rendered", path=("Pools",), selector="cd-pool-list"
        )
    """

    pass


class VerificationTimeoutError(VerificationError, TimeoutError):
    """Raised when a polling window elapses before its condition holds."""

    pass
