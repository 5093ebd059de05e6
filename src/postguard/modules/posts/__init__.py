"""Posts module."""

from postguard.modules.posts.models import Post
from postguard.modules.posts.repos import PostRepository
from postguard.modules.posts.schemas import PostCreate, PostListResponse, PostUpdate
from postguard.modules.posts.services import PostService


__all__ = [
    "Post",
    "PostCreate",
    "PostListResponse",
    "PostRepository",
    "PostService",
    "PostUpdate",
]
