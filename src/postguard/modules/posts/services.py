"""Post service for business logic."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from postguard.config import settings
from postguard.core.errors import NotFoundError, ValidationError
from postguard.core.permissions import (
    Action,
    PermissionChecker,
    Principal,
    Resource,
    require_permission,
)
from postguard.core.utils.validation import parse_input
from postguard.modules.posts.models import Post
from postguard.modules.posts.repos import PostRepository
from postguard.modules.posts.schemas import PostCreate, PostListResponse, PostUpdate


if TYPE_CHECKING:
    from postguard.modules.comments.repos import CommentRepository


logger = structlog.get_logger()


class PostService:
    """Service for post operations.

    Every read and write is authorized against the stored post: the post
    is fetched first so that a missing post and a forbidden post surface
    as different errors.
    """

    def __init__(
        self,
        repo: PostRepository,
        comments: "CommentRepository | None" = None,
    ) -> None:
        self.repo = repo
        self.comments = comments

    @require_permission(Resource.POSTS, Action.CREATE)
    async def create_post(
        self,
        data: PostCreate | Mapping[str, Any],
        *,
        principal: Principal,
    ) -> Post:
        """Create a new post authored by the principal.

        Args:
            data: Post creation data
            principal: The acting principal

        Returns:
            The created post

        Raises:
            ValidationError: If the data is invalid
            ForbiddenError: If the principal may not create posts
        """
        data = parse_input(PostCreate, data)

        post = Post(
            author_id=principal.id,
            title=data.title,
            content=data.content,
            is_published=data.is_published,
        )
        post = await self.repo.create(post)

        logger.info("post_created", post_id=post.id, author_id=principal.id)
        return post

    async def get_post(self, post_id: str, principal: Principal) -> Post:
        """Get a post the principal is allowed to view.

        Args:
            post_id: The post's ID
            principal: The acting principal

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
            ForbiddenError: If the principal may not view the post
        """
        post = await self.repo.get_by_id(post_id)
        if not post:
            raise NotFoundError(
                "Post not found",
                resource="post",
                resource_id=post_id,
            )

        PermissionChecker(principal).ensure_permission(
            Resource.POSTS,
            Action.VIEW,
            post,
            message="You do not have permission to view this post",
        )
        return post

    async def list_posts(
        self,
        principal: Principal,
        page: int = 1,
        page_size: int | None = None,
    ) -> PostListResponse:
        """List the posts the principal may view.

        Args:
            principal: The acting principal
            page: Page number (1-indexed)
            page_size: Items per page, capped at the configured maximum

        Returns:
            One page of visible posts with the total visible count

        Raises:
            ValidationError: If page or page_size is below 1
        """
        if page < 1:
            raise ValidationError(
                "Invalid page", errors=[{"field": "page", "message": "must be at least 1"}]
            )
        if page_size is None:
            page_size = settings.default_page_size
        if page_size < 1:
            raise ValidationError(
                "Invalid page size",
                errors=[{"field": "page_size", "message": "must be at least 1"}],
            )
        page_size = min(page_size, settings.max_page_size)

        visible = PermissionChecker(principal).filter_permitted(
            Resource.POSTS, Action.VIEW, await self.repo.list_all()
        )
        offset = (page - 1) * page_size

        return PostListResponse(
            items=visible[offset : offset + page_size],
            total=len(visible),
            page=page,
            page_size=page_size,
        )

    async def list_authored_posts(self, principal: Principal) -> list[Post]:
        """List the principal's own posts.

        Args:
            principal: The acting principal

        Returns:
            The principal's posts that it may view
        """
        posts = await self.repo.list_by_author(principal.id)
        return PermissionChecker(principal).filter_permitted(Resource.POSTS, Action.VIEW, posts)

    async def update_post(
        self,
        post_id: str,
        data: PostUpdate | Mapping[str, Any],
        principal: Principal,
    ) -> Post:
        """Update a post.

        Args:
            post_id: The post's ID
            data: Update data
            principal: The acting principal

        Returns:
            The updated post

        Raises:
            ValidationError: If the data is invalid
            NotFoundError: If post not found
            ForbiddenError: If the principal may not view or update the post
        """
        data = parse_input(PostUpdate, data)
        post = await self.get_post(post_id, principal)

        PermissionChecker(principal).ensure_permission(
            Resource.POSTS,
            Action.UPDATE,
            post,
            message="You do not have permission to update this post",
        )

        changes = data.model_dump(exclude_none=True)
        if not changes:
            return post

        post = await self.repo.update(post.model_copy(update=changes))

        logger.info(
            "post_updated",
            post_id=post.id,
            principal_id=principal.id,
            fields=sorted(changes),
        )
        return post

    async def delete_post(self, post_id: str, principal: Principal) -> Post:
        """Delete a post together with its comments.

        Args:
            post_id: The post's ID
            principal: The acting principal

        Returns:
            The deleted post

        Raises:
            NotFoundError: If post not found
            ForbiddenError: If the principal may not view or delete the post
        """
        post = await self.get_post(post_id, principal)

        PermissionChecker(principal).ensure_permission(
            Resource.POSTS,
            Action.DELETE,
            post,
            message="You do not have permission to delete this post",
        )

        removed_comments = 0
        if self.comments is not None:
            removed_comments = await self.comments.delete_by_post(post.id)
        await self.repo.delete(post)

        logger.info(
            "post_deleted",
            post_id=post.id,
            principal_id=principal.id,
            removed_comments=removed_comments,
        )
        return post
