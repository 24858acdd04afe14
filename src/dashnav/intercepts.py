"""Network stubs for the dashboard's asynchronous status endpoints.

The sidebar renders badges whose state comes from per-service status
endpoints. Those requests are answered from JSON fixtures so a navigation
walk does not wait on, or flake because of, the backing services.

Example:
    handles = register_status_intercepts(page)
    ...
    clear_intercepts(page, handles)
"""

import json
import re
from collections.abc import Callable
from importlib import resources
from pathlib import Path
from typing import Any

import structlog
from playwright.sync_api import Page, Route
from pydantic import BaseModel, ConfigDict

from dashnav.core.exceptions import ConfigurationError

log = structlog.get_logger(__name__)


class StatusIntercept(BaseModel):
    """A stubbed status endpoint and the fixture answering it."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    fixture: str

    @property
    def pattern(self) -> re.Pattern[str]:
        """URL pattern matching the endpoint with or without a query string."""
        return re.compile(re.escape(self.path) + r"(\?.*)?$")


STATUS_INTERCEPTS: tuple[StatusIntercept, ...] = (
    StatusIntercept(
        name="nfs-ganesha",
        path="/ui-api/nfs-ganesha/status",
        fixture="nfs-ganesha-status.json",
    ),
    StatusIntercept(
        name="rgw", path="/ui-api/rgw/status", fixture="rgw-status.json"
    ),
    StatusIntercept(
        name="block-rbd",
        path="/ui-api/block/rbd/status",
        fixture="block-rbd-status.json",
    ),
)

RouteHandle = tuple[re.Pattern[str], Callable[[Route], None]]


def load_fixture(name: str, fixtures_dir: Path | None = None) -> Any:
    """Load a JSON fixture payload.

    Args:
        name: Fixture file name, e.g. ``rgw-status.json``.
        fixtures_dir: Directory to read from. Package fixtures when None.

    Raises:
        ConfigurationError: If the file is missing or not valid JSON.
    """
    try:
        if fixtures_dir is None:
            text = resources.files("dashnav.fixtures").joinpath(name).read_text(
                encoding="utf-8"
            )
        else:
            text = (Path(fixtures_dir) / name).read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError) as e:
        raise ConfigurationError(f"Fixture not found: {name}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Fixture {name} is not valid JSON: {e}") from e


def _fulfill_with(payload: Any, intercept: StatusIntercept) -> Callable[[Route], None]:
    def handler(route: Route) -> None:
        log.debug("status_intercept_hit", name=intercept.name, url=route.request.url)
        route.fulfill(status=200, json=payload)

    return handler


def register_status_intercepts(
    page: Page,
    fixtures_dir: Path | None = None,
    intercepts: tuple[StatusIntercept, ...] = STATUS_INTERCEPTS,
) -> list[RouteHandle]:
    """Route every status endpoint to its fixture payload.

    All fixtures are loaded before any route is installed, so a missing
    fixture leaves the page untouched.

    Returns:
        The installed ``(pattern, handler)`` pairs, for :func:`clear_intercepts`.
    """
    payloads = [load_fixture(i.fixture, fixtures_dir) for i in intercepts]

    handles: list[RouteHandle] = []
    for intercept, payload in zip(intercepts, payloads):
        pattern = intercept.pattern
        handler = _fulfill_with(payload, intercept)
        page.route(pattern, handler)
        handles.append((pattern, handler))
        log.info(
            "status_intercept_registered",
            name=intercept.name,
            path=intercept.path,
            fixture=intercept.fixture,
        )
    return handles


def clear_intercepts(page: Page, handles: list[RouteHandle]) -> None:
    """Remove routes installed by :func:`register_status_intercepts`."""
    for pattern, handler in handles:
        page.unroute(pattern, handler)
    log.debug("status_intercepts_cleared", count=len(handles))
