"""The role permission table.

Every grant in the application is declared here, once, as literal data.
The table is built at import time and is read-only afterwards, so it can
be shared freely between threads and tasks.

Predicates only look at the principal and the instance they are handed.
For comment rules, "the post" is the comment's parent post.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from postguard.core.permissions.models import (
    ALLOW,
    Action,
    PermissionRule,
    Predicate,
    Principal,
    Resource,
    Role,
)


if TYPE_CHECKING:
    from postguard.modules.comments.models import Comment
    from postguard.modules.posts.models import Post


RuleMap = Mapping[Role, Mapping[Resource, Mapping[Action, PermissionRule]]]


# ============================================================
# Predicates
# ============================================================


def authored_post(principal: Principal, post: "Post") -> bool:
    """The principal wrote the post."""
    return post.author_id == principal.id


def authored_or_published_post(principal: Principal, post: "Post") -> bool:
    """The principal wrote the post, or it is published."""
    return post.author_id == principal.id or post.is_published


def parent_post_visible(principal: Principal, comment: "Comment") -> bool:
    """The comment's post is published, or the principal wrote it."""
    return comment.post.is_published or comment.post.author_id == principal.id


def authored_comment(principal: Principal, comment: "Comment") -> bool:
    """The principal wrote the comment."""
    return comment.user_id == principal.id


def authored_comment_or_parent_post(principal: Principal, comment: "Comment") -> bool:
    """The principal wrote the comment or the post it belongs to."""
    return comment.user_id == principal.id or comment.post.author_id == principal.id


# ============================================================
# Table
# ============================================================


class PolicyTable:
    """Immutable mapping of role -> resource -> action -> rule.

    Every level is partial. A missing entry means "no rule", which the
    checker treats exactly like an explicit deny.
    """

    def __init__(self, rules: RuleMap) -> None:
        self._rules: RuleMap = MappingProxyType(
            {
                role: MappingProxyType(
                    {
                        resource: MappingProxyType(dict(actions))
                        for resource, actions in resources.items()
                    }
                )
                for role, resources in rules.items()
            }
        )

    def lookup(
        self,
        role: Role | str,
        resource: Resource | str,
        action: Action | str,
    ) -> PermissionRule | None:
        """Return the rule for a role, resource and action, if one is declared.

        Args:
            role: The role to look up
            resource: The resource kind (e.g., "posts")
            action: The action (e.g., "view")

        Returns:
            The declared rule, or None when nothing is declared
        """
        resources = self._rules.get(role)
        if resources is None:
            return None
        actions = resources.get(resource)
        if actions is None:
            return None
        return actions.get(action)

    def entries(self) -> Iterator[tuple[Role, Resource, Action, PermissionRule]]:
        """Iterate over every declared (role, resource, action, rule)."""
        for role, resources in self._rules.items():
            for resource, actions in resources.items():
                for action, rule in actions.items():
                    yield role, resource, action, rule

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())


ROLES = PolicyTable(
    {
        Role.ADMIN: {
            Resource.COMMENTS: {
                Action.VIEW: ALLOW,
                Action.CREATE: ALLOW,
                Action.UPDATE: ALLOW,
                Action.DELETE: ALLOW,
            },
            Resource.POSTS: {
                Action.VIEW: ALLOW,
                Action.CREATE: ALLOW,
                Action.UPDATE: ALLOW,
                Action.DELETE: ALLOW,
            },
        },
        Role.MODERATOR: {
            Resource.COMMENTS: {
                Action.VIEW: ALLOW,
                Action.CREATE: Predicate(parent_post_visible),
                Action.UPDATE: Predicate(authored_comment),
                Action.DELETE: ALLOW,
            },
            Resource.POSTS: {
                Action.VIEW: Predicate(authored_or_published_post),
                Action.CREATE: ALLOW,
                Action.UPDATE: Predicate(authored_post),
                Action.DELETE: Predicate(authored_or_published_post),
            },
        },
        Role.USER: {
            Resource.COMMENTS: {
                Action.VIEW: Predicate(parent_post_visible),
                Action.CREATE: Predicate(parent_post_visible),
                Action.UPDATE: Predicate(authored_comment),
                Action.DELETE: Predicate(authored_comment_or_parent_post),
            },
            Resource.POSTS: {
                Action.VIEW: Predicate(authored_or_published_post),
                Action.CREATE: ALLOW,
                Action.UPDATE: Predicate(authored_post),
                Action.DELETE: Predicate(authored_post),
            },
        },
    }
)
