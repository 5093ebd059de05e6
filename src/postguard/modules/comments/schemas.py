"""Pydantic schemas for comment operations."""

from pydantic import BaseModel, Field

from postguard.core.constants import MAX_COMMENT_CONTENT_LENGTH, MIN_COMMENT_CONTENT_LENGTH


class CommentCreate(BaseModel):
    """Schema for creating a comment on a post."""

    content: str = Field(
        ..., min_length=MIN_COMMENT_CONTENT_LENGTH, max_length=MAX_COMMENT_CONTENT_LENGTH
    )
    post_id: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    """Schema for updating a comment."""

    content: str | None = Field(
        None, min_length=MIN_COMMENT_CONTENT_LENGTH, max_length=MAX_COMMENT_CONTENT_LENGTH
    )
