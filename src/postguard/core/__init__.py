"""Core services and cross-cutting concerns."""

from postguard.core.errors import (
    AppException,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from postguard.core.logging import configure_logging


__all__ = [
    # Errors
    "AppException",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    # Logging
    "configure_logging",
]
