"""
dashnav command line.

Walks the navigation sidebar of a running dashboard from a real browser.

Usage:
    dashnav verify --base-url https://ceph-mgr:8443
    dashnav verify --headed --verify-submenu-components
    dashnav tree

Exit codes:
    0 - Every entry was clicked and verified
    1 - The walk failed
    2 - Invalid arguments or configuration
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from pydantic import ValidationError

from dashnav import __version__
from dashnav.config.logging import configure_logging
from dashnav.config.settings import Settings, get_settings
from dashnav.constants.navigation import NAVIGATIONS
from dashnav.core.exceptions import ConfigurationError, DashNavError
from dashnav.intercepts import STATUS_INTERCEPTS, load_fixture
from dashnav.models.navigation import NavBranch, NavLeaf
from dashnav.page_objects.navigation import NavigationPageHelper

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dashnav",
        description="Verify a dashboard's navigation sidebar in a browser.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    verify = subparsers.add_parser("verify", help="Click through every menu entry")
    verify.add_argument("--base-url", help="Dashboard URL (default: DASHNAV_BASE_URL)")
    verify.add_argument(
        "--headed", action="store_true", help="Show the browser window"
    )
    verify.add_argument(
        "--verify-submenu-components",
        action="store_true",
        default=None,
        help="Also assert the component behind each submenu entry",
    )
    verify.add_argument(
        "--timeout-ms", type=int, help="Timeout per locate/assert step"
    )
    verify.add_argument(
        "--debug", action="store_true", help="Pretty console logs at DEBUG level"
    )
    verify.add_argument(
        "--storage-state",
        type=Path,
        help="Playwright storage state file with a logged-in session",
    )

    subparsers.add_parser("tree", help="Print the expected navigation tree")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Layer command line flags over environment settings."""
    overrides: dict[str, object] = {}
    if args.base_url is not None:
        overrides["base_url"] = args.base_url
    if args.headed:
        overrides["headless"] = False
    if args.verify_submenu_components is not None:
        overrides["verify_submenu_components"] = args.verify_submenu_components
    if args.timeout_ms is not None:
        overrides["default_timeout_ms"] = args.timeout_ms
    if args.storage_state is not None:
        overrides["storage_state"] = args.storage_state
    if args.debug:
        overrides.update(debug=True, log_level="DEBUG")

    try:
        return Settings(**overrides) if overrides else get_settings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def check_fixtures(settings: Settings) -> None:
    """Load every status fixture so a bad fixtures dir fails before the browser starts."""
    for intercept in STATUS_INTERCEPTS:
        load_fixture(intercept.fixture, settings.fixtures_dir)


def format_tree(entries: Sequence[NavLeaf | NavBranch], depth: int = 0) -> list[str]:
    lines = []
    for entry in entries:
        indent = "  " * depth
        if isinstance(entry, NavBranch):
            lines.append(f"{indent}{entry.menu}/")
            lines.extend(format_tree(entry.submenus, depth + 1))
        else:
            lines.append(f"{indent}{entry.menu} -> {entry.component}")
    return lines


def run_verify(settings: Settings) -> int:
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.headless)
        try:
            context = browser.new_context(
                ignore_https_errors=True,
                storage_state=settings.storage_state,
            )
            page = context.new_page()
            nav = NavigationPageHelper(page, settings=settings)
            nav.navigate_to()
            visited = nav.check_navigations()
        finally:
            browser.close()

    for entry in visited:
        status = "OK" if entry.verified else "--"
        target = entry.component or ""
        print(f"[{status}] {' > '.join(entry.path)} {target}".rstrip())
    print(f"\n{len(visited)} entries visited")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "tree":
        print("\n".join(format_tree(NAVIGATIONS)))
        return 0

    try:
        settings = resolve_settings(args)
        check_fixtures(settings)
    except ConfigurationError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    try:
        return run_verify(settings)
    except ConfigurationError as e:
        log.error("navigation_walk_misconfigured", error=str(e))
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except (DashNavError, PlaywrightError) as e:
        log.error("navigation_walk_failed", error=str(e))
        print(f"[FAIL] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
