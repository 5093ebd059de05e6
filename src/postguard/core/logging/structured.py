"""Structured logging setup.

Configures structlog once per process. Every module then obtains its
logger with ``structlog.get_logger()``.
"""

import logging
from typing import TYPE_CHECKING

import structlog


if TYPE_CHECKING:
    from postguard.config import Settings


def configure_logging(settings: "Settings") -> None:
    """Configure structlog for the given settings.

    Production renders one JSON object per line; other environments use
    the human-friendly console renderer.

    Args:
        settings: Application settings providing environment and log level
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
