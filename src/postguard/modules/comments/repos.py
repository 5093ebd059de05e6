"""Comment repository."""

from postguard.modules.comments.models import Comment
from postguard.modules.posts.repos import PostRepository


class CommentRepository:
    """In-memory repository for comments.

    Comments are always returned with their current parent post attached,
    read through the post repository.
    """

    def __init__(self, posts: PostRepository) -> None:
        self.posts = posts
        self._comments: dict[str, Comment] = {}

    async def _with_post(self, comment: Comment) -> Comment | None:
        post = await self.posts.get_by_id(comment.post_id)
        if post is None:
            return None
        if post == comment.post:
            return comment
        return comment.model_copy(update={"post": post})

    async def _with_posts(self, comments: list[Comment]) -> list[Comment]:
        results = []
        for comment in comments:
            attached = await self._with_post(comment)
            if attached is not None:
                results.append(attached)
        return results

    async def create(self, comment: Comment) -> Comment:
        """Store a new comment.

        Args:
            comment: Comment instance to store

        Returns:
            The stored comment
        """
        self._comments[comment.id] = comment
        return comment

    async def get_by_id(self, comment_id: str) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: The comment's ID

        Returns:
            Comment with its post if found, None otherwise
        """
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        return await self._with_post(comment)

    async def list_by_post(self, post_id: str) -> list[Comment]:
        """List the comments on one post.

        Args:
            post_id: The parent post's ID

        Returns:
            Comments on the post
        """
        return await self._with_posts(
            [c for c in self._comments.values() if c.post_id == post_id]
        )

    async def list_by_user(self, user_id: str) -> list[Comment]:
        """List the comments written by one user.

        Args:
            user_id: The author's ID

        Returns:
            Comments written by the user
        """
        return await self._with_posts(
            [c for c in self._comments.values() if c.user_id == user_id]
        )

    async def update(self, comment: Comment) -> Comment:
        """Replace a stored comment with an updated copy.

        Args:
            comment: Comment instance with updated fields

        Returns:
            The updated comment
        """
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment: Comment) -> None:
        """Delete a comment.

        Args:
            comment: Comment instance to delete
        """
        self._comments.pop(comment.id, None)

    async def delete_by_post(self, post_id: str) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The parent post's ID

        Returns:
            Number of comments deleted
        """
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
