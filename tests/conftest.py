"""Pytest configuration and shared fixtures."""

import pytest

from postguard.core.permissions import Principal, Role
from postguard.modules.comments import CommentRepository, CommentService
from postguard.modules.posts import PostRepository, PostService
from tests.factories.principal import PrincipalFactory


@pytest.fixture
def admin() -> Principal:
    """Principal holding only the ADMIN role."""
    return PrincipalFactory.build(id="admin1", roles=(Role.ADMIN,))


@pytest.fixture
def moderator() -> Principal:
    """Principal holding only the MODERATOR role."""
    return PrincipalFactory.build(id="mod1", roles=(Role.MODERATOR,))


@pytest.fixture
def user() -> Principal:
    """Principal holding only the USER role."""
    return PrincipalFactory.build(id="user1", roles=(Role.USER,))


@pytest.fixture
def other_user() -> Principal:
    """A second USER, unrelated to ``user``."""
    return PrincipalFactory.build(id="user2", roles=(Role.USER,))


@pytest.fixture
def post_repo() -> PostRepository:
    """Empty in-memory post repository."""
    return PostRepository()


@pytest.fixture
def comment_repo(post_repo: PostRepository) -> CommentRepository:
    """Empty in-memory comment repository backed by ``post_repo``."""
    return CommentRepository(post_repo)


@pytest.fixture
def post_service(post_repo: PostRepository, comment_repo: CommentRepository) -> PostService:
    """Post service wired to the in-memory repositories."""
    return PostService(repo=post_repo, comments=comment_repo)


@pytest.fixture
def comment_service(
    comment_repo: CommentRepository, post_service: PostService
) -> CommentService:
    """Comment service wired to the in-memory repositories."""
    return CommentService(repo=comment_repo, posts=post_service)
