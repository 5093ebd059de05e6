"""Permission decorators for service methods.

This module provides a decorator that can be applied to async service
methods whose action needs no resource instance, such as creating a post.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import structlog

from postguard.core.errors import UnauthorizedError
from postguard.core.permissions.checker import PermissionChecker
from postguard.core.permissions.models import Action, Principal, Resource


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def _get_principal(kwargs: dict[str, Any]) -> Principal | None:
    """Extract the principal from keyword arguments."""
    return cast("Principal | None", kwargs.get("principal"))


def require_permission(
    resource: Resource | str, action: Action | str
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires a specific permission to call a method.

    The decorated method must receive the principal as the ``principal``
    keyword argument. Predicate rules never pass here because no instance
    is available; use :meth:`PermissionChecker.ensure_permission` for those.

    Usage:
        @require_permission("posts", "create")
        async def create_post(self, data: PostCreate, *, principal: Principal):
            ...

    Args:
        resource: The resource being accessed (e.g., "posts")
        action: The action being performed (e.g., "create")

    Returns:
        Decorator function

    Raises:
        UnauthorizedError: If no principal is supplied
        ForbiddenError: If the principal lacks the required permission
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            principal = _get_principal(kwargs)

            if principal is None:
                logger.warning(
                    "principal_missing",
                    function=func.__qualname__,
                )
                raise UnauthorizedError()

            PermissionChecker(principal).ensure_permission(resource, action)

            return await func(*args, **kwargs)

        return wrapper

    return decorator
