"""Unit tests for the role permission table.

These tests pin the declared grants, so that any change to business
policy shows up as a deliberate test change.
"""

import pytest

from postguard.core.permissions import (
    ALLOW,
    DENY,
    ROLES,
    Action,
    Allow,
    Deny,
    PolicyTable,
    Predicate,
    Resource,
    Role,
)
from postguard.core.permissions.policy import (
    authored_comment,
    authored_comment_or_parent_post,
    authored_or_published_post,
    authored_post,
    parent_post_visible,
)


pytestmark = pytest.mark.unit


EXPECTED_RULES = {
    (Role.ADMIN, Resource.POSTS, Action.VIEW): ALLOW,
    (Role.ADMIN, Resource.POSTS, Action.CREATE): ALLOW,
    (Role.ADMIN, Resource.POSTS, Action.UPDATE): ALLOW,
    (Role.ADMIN, Resource.POSTS, Action.DELETE): ALLOW,
    (Role.ADMIN, Resource.COMMENTS, Action.VIEW): ALLOW,
    (Role.ADMIN, Resource.COMMENTS, Action.CREATE): ALLOW,
    (Role.ADMIN, Resource.COMMENTS, Action.UPDATE): ALLOW,
    (Role.ADMIN, Resource.COMMENTS, Action.DELETE): ALLOW,
    (Role.MODERATOR, Resource.COMMENTS, Action.VIEW): ALLOW,
    (Role.MODERATOR, Resource.COMMENTS, Action.CREATE): Predicate(parent_post_visible),
    (Role.MODERATOR, Resource.COMMENTS, Action.UPDATE): Predicate(authored_comment),
    (Role.MODERATOR, Resource.COMMENTS, Action.DELETE): ALLOW,
    (Role.MODERATOR, Resource.POSTS, Action.VIEW): Predicate(authored_or_published_post),
    (Role.MODERATOR, Resource.POSTS, Action.CREATE): ALLOW,
    (Role.MODERATOR, Resource.POSTS, Action.UPDATE): Predicate(authored_post),
    (Role.MODERATOR, Resource.POSTS, Action.DELETE): Predicate(authored_or_published_post),
    (Role.USER, Resource.COMMENTS, Action.VIEW): Predicate(parent_post_visible),
    (Role.USER, Resource.COMMENTS, Action.CREATE): Predicate(parent_post_visible),
    (Role.USER, Resource.COMMENTS, Action.UPDATE): Predicate(authored_comment),
    (Role.USER, Resource.COMMENTS, Action.DELETE): Predicate(authored_comment_or_parent_post),
    (Role.USER, Resource.POSTS, Action.VIEW): Predicate(authored_or_published_post),
    (Role.USER, Resource.POSTS, Action.CREATE): ALLOW,
    (Role.USER, Resource.POSTS, Action.UPDATE): Predicate(authored_post),
    (Role.USER, Resource.POSTS, Action.DELETE): Predicate(authored_post),
}


class TestRolesTable:
    """Tests for the declared ROLES table."""

    def test_table_matches_declared_policy(self):
        """Every declared entry should match the business policy exactly."""
        declared = {
            (role, resource, action): rule for role, resource, action, rule in ROLES.entries()
        }

        assert declared == EXPECTED_RULES
        assert len(ROLES) == len(EXPECTED_RULES)

    @pytest.mark.parametrize(("key", "rule"), list(EXPECTED_RULES.items()))
    def test_lookup_returns_declared_rule(self, key, rule):
        """lookup should return the rule declared for each entry."""
        assert ROLES.lookup(*key) == rule

    def test_lookup_accepts_plain_strings(self):
        """Plain string identifiers should resolve like the enum members."""
        assert ROLES.lookup("ADMIN", "posts", "view") == ALLOW
        assert isinstance(ROLES.lookup("USER", "comments", "delete"), Predicate)

    @pytest.mark.parametrize(
        ("role", "resource", "action"),
        [
            ("GUEST", "posts", "view"),
            ("USER", "attachments", "view"),
            ("USER", "posts", "publish"),
            (Role.MODERATOR, Resource.POSTS, "archive"),
        ],
    )
    def test_lookup_missing_entry_returns_none(self, role, resource, action):
        """Undeclared combinations should have no rule at any level."""
        assert ROLES.lookup(role, resource, action) is None

    def test_admin_never_uses_predicates(self):
        """ADMIN grants are all unconditional."""
        admin_rules = [rule for role, _, _, rule in ROLES.entries() if role == Role.ADMIN]

        assert len(admin_rules) == 8
        assert all(isinstance(rule, Allow) for rule in admin_rules)


class TestPolicyTable:
    """Tests for the PolicyTable container."""

    def test_table_is_read_only(self):
        """The nested mappings should reject writes."""
        table = PolicyTable({Role.USER: {Resource.POSTS: {Action.VIEW: ALLOW}}})

        with pytest.raises(TypeError):
            table._rules[Role.ADMIN] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            table._rules[Role.USER][Resource.POSTS][Action.VIEW] = DENY  # type: ignore[index]

    def test_table_copies_source_mapping(self):
        """Mutating the source mapping after construction has no effect."""
        actions = {Action.VIEW: ALLOW}
        table = PolicyTable({Role.USER: {Resource.POSTS: actions}})

        actions[Action.DELETE] = ALLOW

        assert table.lookup(Role.USER, Resource.POSTS, Action.DELETE) is None

    def test_explicit_deny_is_returned(self):
        """Explicit Deny entries are returned as declared."""
        table = PolicyTable({Role.USER: {Resource.POSTS: {Action.DELETE: DENY}}})

        assert isinstance(table.lookup(Role.USER, Resource.POSTS, Action.DELETE), Deny)

    def test_empty_table(self):
        """An empty table has no entries and no rules."""
        table = PolicyTable({})

        assert len(table) == 0
        assert table.lookup(Role.ADMIN, Resource.POSTS, Action.VIEW) is None
