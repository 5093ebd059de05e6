"""Post models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from postguard.core.utils.defaults import new_id, utc_now


class Post(BaseModel):
    """A blog post.

    Attributes:
        id: Unique identifier
        author_id: Identifier of the principal who wrote the post
        title: Post title
        content: Post body
        is_published: Whether the post is visible to everyone
        created_date: When the post was created
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    author_id: str
    title: str
    content: str
    is_published: bool = False
    created_date: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id}, is_published={self.is_published})>"
