"""Comment models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from postguard.core.utils.defaults import new_id, utc_now
from postguard.modules.posts.models import Post


class Comment(BaseModel):
    """A comment on a post.

    The parent post travels with the comment because several permission
    rules decide on the post's author and publication state.

    Attributes:
        id: Unique identifier
        content: Comment text
        post_id: Identifier of the parent post
        user_id: Identifier of the principal who wrote the comment
        created_date: When the comment was created
        post: The parent post
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    content: str
    post_id: str
    user_id: str
    created_date: datetime = Field(default_factory=utc_now)
    post: Post

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, post_id={self.post_id}, user_id={self.user_id})>"
