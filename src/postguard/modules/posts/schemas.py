"""Pydantic schemas for post operations."""

from pydantic import BaseModel, Field

from postguard.core.constants import (
    MAX_POST_CONTENT_LENGTH,
    MAX_POST_TITLE_LENGTH,
    MIN_POST_CONTENT_LENGTH,
    MIN_POST_TITLE_LENGTH,
)
from postguard.modules.posts.models import Post


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=MIN_POST_TITLE_LENGTH, max_length=MAX_POST_TITLE_LENGTH)
    content: str = Field(
        ..., min_length=MIN_POST_CONTENT_LENGTH, max_length=MAX_POST_CONTENT_LENGTH
    )
    is_published: bool = False


class PostUpdate(BaseModel):
    """Schema for updating post data."""

    title: str | None = Field(
        None, min_length=MIN_POST_TITLE_LENGTH, max_length=MAX_POST_TITLE_LENGTH
    )
    content: str | None = Field(
        None, min_length=MIN_POST_CONTENT_LENGTH, max_length=MAX_POST_CONTENT_LENGTH
    )
    is_published: bool | None = None


class PostListResponse(BaseModel):
    """Schema for listing posts."""

    items: list[Post]
    total: int
    page: int
    page_size: int
