"""Unit tests for CommentRepository."""

import pytest

from postguard.modules.comments import CommentRepository
from postguard.modules.posts import PostRepository
from tests.factories.comment import CommentFactory
from tests.factories.post import PostFactory


pytestmark = pytest.mark.unit


class TestCommentRepository:
    """Tests for the in-memory comment repository."""

    async def test_comments_carry_current_post(
        self, post_repo: PostRepository, comment_repo: CommentRepository
    ):
        """Reads attach the latest version of the parent post."""
        post = await post_repo.create(PostFactory.build(is_published=False))
        comment = await comment_repo.create(CommentFactory.for_post(post))

        published = await post_repo.update(post.model_copy(update={"is_published": True}))

        fetched = await comment_repo.get_by_id(comment.id)
        assert fetched.post == published
        assert [c.post for c in await comment_repo.list_by_post(post.id)] == [published]

    async def test_orphaned_comments_are_hidden(
        self, post_repo: PostRepository, comment_repo: CommentRepository
    ):
        """Comments whose post no longer exists are not returned."""
        post = await post_repo.create(PostFactory.build())
        comment = await comment_repo.create(CommentFactory.for_post(post, user_id="user1"))

        await post_repo.delete(post)

        assert await comment_repo.get_by_id(comment.id) is None
        assert await comment_repo.list_by_user("user1") == []

    async def test_delete_by_post(self, post_repo: PostRepository, comment_repo: CommentRepository):
        first = await post_repo.create(PostFactory.build())
        second = await post_repo.create(PostFactory.build())
        await comment_repo.create(CommentFactory.for_post(first))
        await comment_repo.create(CommentFactory.for_post(first))
        kept = await comment_repo.create(CommentFactory.for_post(second))

        assert await comment_repo.delete_by_post(first.id) == 2
        assert await comment_repo.list_by_post(first.id) == []
        assert await comment_repo.list_by_post(second.id) == [kept]
