"""Domain exceptions for the application.

These exceptions represent business-logic errors. Whatever transport sits
in front of the services can turn them into RFC 7807 Problem Details with
:func:`postguard.core.errors.handlers.to_problem_detail`.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Post not found", resource="post", resource_id=post_id)
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ValidationError(AppException):
    """Raised when input data fails validation.

    Example:
        raise ValidationError(
            "Invalid input data",
            errors=[{"field": "title", "message": "String too short"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when an operation needs a principal and none was supplied.

    Example:
        raise UnauthorizedError("Authentication required")
    """

    message = "Authentication required"
    error_code = "auth_required"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when a principal lacks permission to act on a resource.

    Carries the denied permission in ``details["required_permission"]``
    when raised by the permission checker.

    Example:
        raise ForbiddenError(
            "You do not have permission to update this post",
            details={"required_permission": "posts:update"}
        )
    """

    message = "You do not have permission to perform this action"
    error_code = "permission_denied"
    status_code = 403
