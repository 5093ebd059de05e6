"""Permission checking logic.

This module provides functions for checking if a principal may perform
an action on a resource, based on the roles it holds and, for
attribute-based rules, on the resource instance itself.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

import structlog

from postguard.config import settings
from postguard.core.errors import ForbiddenError
from postguard.core.permissions.models import (
    Action,
    Allow,
    Predicate,
    Principal,
    Resource,
    permission_name,
)
from postguard.core.permissions.policy import ROLES, PolicyTable


if TYPE_CHECKING:
    from postguard.modules.comments.models import Comment
    from postguard.modules.posts.models import Post

    ResourceData = Post | Comment


logger = structlog.get_logger()

T = TypeVar("T")


def has_permission(
    principal: Principal,
    resource: Resource | str,
    action: Action | str,
    data: "ResourceData | None" = None,
    *,
    table: PolicyTable = ROLES,
) -> bool:
    """Decide whether a principal may perform an action on a resource.

    Each role held by the principal is looked up on its own; the principal
    is allowed if any one role allows it. A predicate rule never allows
    anything when no instance data is supplied.

    Args:
        principal: The actor being authorized
        resource: The resource kind (e.g., "posts")
        action: The action (e.g., "update")
        data: The resource instance, required by predicate rules. Its shape
            must match the resource kind: a Post for "posts", a Comment
            (carrying its parent post) for "comments"
        table: The policy table to consult

    Returns:
        True if at least one role grants the action, False otherwise
    """
    for role in principal.roles:
        rule = table.lookup(role, resource, action)
        if isinstance(rule, Allow):
            return True
        if isinstance(rule, Predicate) and data is not None and rule(principal, data):
            return True

    return False


class PermissionChecker:
    """Service for checking one principal's permissions.

    Wraps :func:`has_permission` with the multi-permission queries and the
    enforcement helper used by the resource services.
    """

    def __init__(self, principal: Principal, table: PolicyTable = ROLES) -> None:
        self.principal = principal
        self.table = table

    def has_permission(
        self,
        resource: Resource | str,
        action: Action | str,
        data: "ResourceData | None" = None,
    ) -> bool:
        """Check if the principal has a specific permission.

        Args:
            resource: The resource to check (e.g., "comments")
            action: The action to check (e.g., "view")
            data: Optional resource instance for attribute-based rules

        Returns:
            True if the principal has the permission, False otherwise
        """
        return has_permission(self.principal, resource, action, data, table=self.table)

    def has_any_permission(
        self,
        permissions: list[tuple[Resource | str, Action | str]],
        data: "ResourceData | None" = None,
    ) -> bool:
        """Check if the principal has any of the specified permissions.

        Args:
            permissions: List of (resource, action) tuples to check
            data: Optional resource instance shared by every check

        Returns:
            True if the principal has at least one permission
        """
        return any(
            self.has_permission(resource, action, data) for resource, action in permissions
        )

    def has_all_permissions(
        self,
        permissions: list[tuple[Resource | str, Action | str]],
        data: "ResourceData | None" = None,
    ) -> bool:
        """Check if the principal has all of the specified permissions.

        Args:
            permissions: List of (resource, action) tuples to check
            data: Optional resource instance shared by every check

        Returns:
            True if the principal has all permissions
        """
        return all(
            self.has_permission(resource, action, data) for resource, action in permissions
        )

    def filter_permitted(
        self,
        resource: Resource | str,
        action: Action | str,
        items: Iterable[T],
    ) -> list[T]:
        """Keep only the items the principal may act on.

        Authorization is applied after fetching: callers load a candidate
        set and pass it through here.

        Args:
            resource: The resource kind of every item
            action: The action to check for each item
            items: Candidate resource instances

        Returns:
            The permitted items, in their original order
        """
        return [item for item in items if self.has_permission(resource, action, item)]

    def ensure_permission(
        self,
        resource: Resource | str,
        action: Action | str,
        data: "ResourceData | None" = None,
        message: str | None = None,
    ) -> None:
        """Raise unless the principal has the permission.

        Args:
            resource: The resource kind
            action: The action being attempted
            data: Optional resource instance for attribute-based rules
            message: Error message to use on denial

        Raises:
            ForbiddenError: If the principal lacks the permission
        """
        name = permission_name(resource, action)
        roles = [str(role) for role in self.principal.roles]

        if not self.has_permission(resource, action, data):
            logger.warning(
                "permission_denied",
                principal_id=self.principal.id,
                roles=roles,
                permission=name,
            )
            raise ForbiddenError(
                message or f"You do not have permission to {action} {resource}",
                details={"required_permission": name},
            )

        if settings.log_permission_decisions:
            logger.debug(
                "permission_granted",
                principal_id=self.principal.id,
                roles=roles,
                permission=name,
            )


def check_permission(
    principal: Principal,
    resource: Resource | str,
    action: Action | str,
    data: "ResourceData | None" = None,
) -> bool:
    """Convenience function to check a principal's permission.

    For use in service code when you need a simple permission check.

    Args:
        principal: The principal to check
        resource: The resource to check
        action: The action to check
        data: Optional resource instance

    Returns:
        True if the principal has permission
    """
    return PermissionChecker(principal).has_permission(resource, action, data)
