"""RFC 7807 Problem Details rendering.

This module turns application exceptions into standardized error payloads
following the RFC 7807 "Problem Details for HTTP APIs" specification. It
only builds the payload; sending it is the job of whatever transport wraps
the services.

See: https://tools.ietf.org/html/rfc7807
"""

from typing import Any

import pydantic
import structlog
from pydantic import BaseModel

from postguard.core.errors.exceptions import AppException, ValidationError


logger = structlog.get_logger()


class FieldError(BaseModel):
    """Represents a single field validation error."""

    field: str
    message: str
    type: str | None = None


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response schema.

    Attributes:
        type: URI reference identifying the problem type
        title: Short human-readable summary
        status: HTTP status code
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying this specific occurrence
        errors: List of field-level errors (for validation errors)
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str | None = None
    errors: list[FieldError] | None = None

    model_config = {"extra": "allow"}


def _get_error_type_uri(error_code: str) -> str:
    """Generate a URI for the error type."""
    from postguard.config import settings

    return f"{settings.api_docs_base_url}/errors/{error_code}"


def to_problem_detail(exc: AppException, instance: str | None = None) -> dict[str, Any]:
    """Render an application exception as a Problem Details payload.

    Args:
        exc: The exception to render
        instance: Optional identifier of the failing operation

    Returns:
        JSON-serialisable dict with the RFC 7807 members plus any
        additional details carried by the exception
    """
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        instance=instance,
        details=exc.details,
    )

    details = dict(exc.details)
    raw_errors = details.pop("errors", None)
    errors = (
        [FieldError.model_validate(error) for error in raw_errors] if raw_errors else None
    )

    content: dict[str, Any] = ProblemDetail(
        type=_get_error_type_uri(exc.error_code),
        title=exc.error_code.replace("_", " ").title(),
        status=exc.status_code,
        detail=exc.message,
        instance=instance,
        errors=errors,
    ).model_dump(exclude_none=True)

    # Add any additional details from the exception
    for key, value in details.items():
        if key not in content:
            content[key] = value

    return content


def validation_error_from_pydantic(exc: pydantic.ValidationError) -> ValidationError:
    """Convert a pydantic validation failure into a ValidationError.

    Args:
        exc: The pydantic error raised while validating service input

    Returns:
        ValidationError with one field error per pydantic error
    """
    errors: list[dict[str, Any]] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "unknown"
        errors.append(
            {
                "field": field,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type"),
            }
        )

    return ValidationError("Input validation failed", errors=errors)
