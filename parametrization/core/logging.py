"""
Logging setup.

Services and the request middleware log through structlog; framework
plumbing (registry, container) logs through the stdlib ``logging`` module.
Both end up on stdout. Values bound with ``structlog.contextvars`` (the
request ID) are merged into every event.

Usage:
    import structlog

    logger = structlog.get_logger()
    logger.info("parametrization.saved", id=record.id, key=record.key)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from parametrization.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog from settings."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
        level=level,
    )

    if settings.log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
