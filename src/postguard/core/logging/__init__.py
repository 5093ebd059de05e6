"""Logging module with structured logging."""

from postguard.core.logging.structured import configure_logging


__all__ = [
    "configure_logging",
]
