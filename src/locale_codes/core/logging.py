"""structlog setup for command-line use.

Library code only calls ``structlog.get_logger``; configuring output is
left to the application.
"""

from __future__ import annotations

import logging
import sys

import structlog

from locale_codes.core.models.config import LogConfig


def configure_logging(config: LogConfig | None = None) -> None:
    """Configure structlog with a level filter and a console or JSON renderer."""
    config = config or LogConfig()
    level = logging.getLevelName(config.level)

    if config.structured:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
