"""Logging configuration using structlog."""

import logging
import sys

import structlog

from dashnav.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the helper and its CLI.

    Args:
        settings: Settings to take the level and renderer from. The cached
            environment settings when None, so the CLI can pass the ones its
            flags produced.
    """
    settings = settings or get_settings()
    log_level = logging.getLevelName(settings.log_level)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    else:
        # Walk failures end up in CI logs, keep tracebacks machine readable
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Playwright logs through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
