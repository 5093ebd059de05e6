"""Authorization vocabulary.

This module defines the values the permission engine reasons about:
- Role: The fixed set of roles a principal can hold
- Resource / Action: The protected resource kinds and what can be done to them
- Principal: The authenticated actor being authorized
- Allow / Deny / Predicate: The three shapes a permission rule can take
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Role(StrEnum):
    """Roles a principal can hold.

    Roles are independent of each other; no role inherits another's grants.
    """

    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    USER = "USER"


class Resource(StrEnum):
    """Protected resource kinds."""

    POSTS = "posts"
    COMMENTS = "comments"


class Action(StrEnum):
    """Actions available on every resource kind."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Principal(BaseModel):
    """The authenticated actor a decision is made for.

    Produced by whatever identity provider fronts the services. Role order
    carries no meaning.

    Attributes:
        id: Stable identifier compared against ownership attributes
        roles: Roles held by the principal
        full_name: Display name, informational only
    """

    model_config = ConfigDict(frozen=True)

    id: str
    roles: tuple[Role, ...] = ()
    full_name: str | None = None

    def has_role(self, role: Role | str) -> bool:
        """Return True if the principal holds the given role."""
        return role in self.roles


@dataclass(frozen=True)
class Allow:
    """Grants the action unconditionally."""


@dataclass(frozen=True)
class Deny:
    """Refuses the action unconditionally; same effect as a missing rule."""


@dataclass(frozen=True)
class Predicate:
    """Grants the action when ``check(principal, instance)`` is true.

    The check only ever sees the principal and the single instance under
    evaluation and must not perform I/O.
    """

    check: Callable[[Principal, Any], bool]

    def __call__(self, principal: Principal, instance: Any) -> bool:
        return bool(self.check(principal, instance))


PermissionRule = Allow | Deny | Predicate

ALLOW = Allow()
DENY = Deny()


def permission_name(resource: Resource | str, action: Action | str) -> str:
    """Return the permission name in ``resource:action`` format."""
    return f"{resource}:{action}"
