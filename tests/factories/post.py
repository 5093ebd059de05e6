"""Factory for Post models."""

from uuid import uuid4

from polyfactory.factories.pydantic_factory import ModelFactory

from postguard.modules.posts.models import Post
from postguard.modules.posts.schemas import PostCreate


class PostFactory(ModelFactory[Post]):
    """Factory for creating test Post instances."""

    __model__ = Post

    @classmethod
    def id(cls) -> str:
        """Generate a unique post ID."""
        return uuid4().hex

    @classmethod
    def author_id(cls) -> str:
        """Generate an author ID."""
        return f"user-{uuid4().hex[:8]}"

    @classmethod
    def title(cls) -> str:
        """Generate a title within the allowed length."""
        return f"Post {uuid4().hex[:8]}"

    @classmethod
    def content(cls) -> str:
        """Generate a body within the allowed length."""
        return f"Some post content {uuid4().hex}"

    @classmethod
    def is_published(cls) -> bool:
        """Default to unpublished."""
        return False


class PostCreateFactory(ModelFactory[PostCreate]):
    """Factory for creating PostCreate schemas."""

    __model__ = PostCreate

    @classmethod
    def title(cls) -> str:
        """Generate a title within the allowed length."""
        return f"Post {uuid4().hex[:8]}"

    @classmethod
    def content(cls) -> str:
        """Generate a body within the allowed length."""
        return f"Some post content {uuid4().hex[:16]}"
