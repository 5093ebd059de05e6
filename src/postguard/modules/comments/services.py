"""Comment service for business logic."""

from collections.abc import Mapping
from typing import Any

import structlog

from postguard.core.errors import NotFoundError
from postguard.core.permissions import Action, PermissionChecker, Principal, Resource
from postguard.core.utils.validation import parse_input
from postguard.modules.comments.models import Comment
from postguard.modules.comments.repos import CommentRepository
from postguard.modules.comments.schemas import CommentCreate, CommentUpdate
from postguard.modules.posts.services import PostService


logger = structlog.get_logger()


class CommentService:
    """Service for comment operations.

    Comments are authorized together with their parent post, which is
    loaded through the post service so that the post's own view rule
    applies first.
    """

    def __init__(self, repo: CommentRepository, posts: PostService) -> None:
        self.repo = repo
        self.posts = posts

    async def create_comment(
        self,
        data: CommentCreate | Mapping[str, Any],
        principal: Principal,
    ) -> Comment:
        """Create a comment on a post.

        Args:
            data: Comment creation data
            principal: The acting principal

        Returns:
            The created comment

        Raises:
            ValidationError: If the data is invalid
            NotFoundError: If the post does not exist
            ForbiddenError: If the principal may not view the post or comment on it
        """
        data = parse_input(CommentCreate, data)
        post = await self.posts.get_post(data.post_id, principal)

        draft = Comment(
            content=data.content,
            post_id=post.id,
            user_id=principal.id,
            post=post,
        )
        PermissionChecker(principal).ensure_permission(
            Resource.COMMENTS,
            Action.CREATE,
            draft,
            message="You do not have permission to create a comment",
        )

        comment = await self.repo.create(draft)

        logger.info(
            "comment_created",
            comment_id=comment.id,
            post_id=post.id,
            user_id=principal.id,
        )
        return comment

    async def _get_existing(self, comment_id: str) -> Comment:
        comment = await self.repo.get_by_id(comment_id)
        if not comment:
            raise NotFoundError(
                "Comment not found",
                resource="comment",
                resource_id=comment_id,
            )
        return comment

    async def get_comment(self, comment_id: str, principal: Principal) -> Comment:
        """Get a comment the principal is allowed to view.

        Args:
            comment_id: The comment's ID
            principal: The acting principal

        Returns:
            The comment with its post

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If the principal may not view the comment
        """
        comment = await self._get_existing(comment_id)

        PermissionChecker(principal).ensure_permission(
            Resource.COMMENTS,
            Action.VIEW,
            comment,
            message="You do not have permission to view this comment",
        )
        return comment

    async def list_comments(self, post_id: str, principal: Principal) -> list[Comment]:
        """List the visible comments on a post.

        Args:
            post_id: The parent post's ID
            principal: The acting principal

        Returns:
            Comments on the post that the principal may view
        """
        comments = await self.repo.list_by_post(post_id)
        return PermissionChecker(principal).filter_permitted(
            Resource.COMMENTS, Action.VIEW, comments
        )

    async def list_user_comments(self, principal: Principal) -> list[Comment]:
        """List the principal's own comments that it may still view.

        Args:
            principal: The acting principal

        Returns:
            The principal's visible comments
        """
        comments = await self.repo.list_by_user(principal.id)
        return PermissionChecker(principal).filter_permitted(
            Resource.COMMENTS, Action.VIEW, comments
        )

    async def update_comment(
        self,
        comment_id: str,
        data: CommentUpdate | Mapping[str, Any],
        principal: Principal,
    ) -> Comment:
        """Update a comment's content.

        Args:
            comment_id: The comment's ID
            data: Update data
            principal: The acting principal

        Returns:
            The updated comment

        Raises:
            ValidationError: If the data is invalid
            NotFoundError: If comment not found
            ForbiddenError: If the principal may not update the comment
        """
        data = parse_input(CommentUpdate, data)
        comment = await self._get_existing(comment_id)

        PermissionChecker(principal).ensure_permission(
            Resource.COMMENTS,
            Action.UPDATE,
            comment,
            message="You do not have permission to update a comment",
        )

        if data.content is None:
            return comment

        comment = await self.repo.update(comment.model_copy(update={"content": data.content}))

        logger.info("comment_updated", comment_id=comment.id, principal_id=principal.id)
        return comment

    async def delete_comment(self, comment_id: str, principal: Principal) -> Comment:
        """Delete a comment.

        Args:
            comment_id: The comment's ID
            principal: The acting principal

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If the principal may not delete the comment
        """
        comment = await self._get_existing(comment_id)

        PermissionChecker(principal).ensure_permission(
            Resource.COMMENTS,
            Action.DELETE,
            comment,
            message="You do not have permission to delete this comment",
        )

        await self.repo.delete(comment)

        logger.info("comment_deleted", comment_id=comment.id, principal_id=principal.id)
        return comment
