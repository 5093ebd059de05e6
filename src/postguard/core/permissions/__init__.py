"""Permission system combining role grants with attribute-based rules."""

from postguard.core.permissions.checker import (
    PermissionChecker,
    check_permission,
    has_permission,
)
from postguard.core.permissions.decorators import require_permission
from postguard.core.permissions.models import (
    ALLOW,
    DENY,
    Action,
    Allow,
    Deny,
    PermissionRule,
    Predicate,
    Principal,
    Resource,
    Role,
    permission_name,
)
from postguard.core.permissions.policy import ROLES, PolicyTable


__all__ = [
    # Models
    "ALLOW",
    "DENY",
    "Action",
    "Allow",
    "Deny",
    # Checker
    "PermissionChecker",
    "PermissionRule",
    # Policy
    "PolicyTable",
    "Predicate",
    "Principal",
    "ROLES",
    "Resource",
    "Role",
    "check_permission",
    "has_permission",
    "permission_name",
    # Decorators
    "require_permission",
]
