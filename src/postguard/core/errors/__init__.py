"""Error handling module with RFC 7807 Problem Details."""

from postguard.core.errors.exceptions import (
    AppException,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from postguard.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    to_problem_detail,
    validation_error_from_pydantic,
)


__all__ = [
    # Exceptions
    "AppException",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "ProblemDetail",
    "UnauthorizedError",
    "ValidationError",
    "to_problem_detail",
    "validation_error_from_pydantic",
]
