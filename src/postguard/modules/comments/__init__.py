"""Comments module."""

from postguard.modules.comments.models import Comment
from postguard.modules.comments.repos import CommentRepository
from postguard.modules.comments.schemas import CommentCreate, CommentUpdate
from postguard.modules.comments.services import CommentService


__all__ = [
    "Comment",
    "CommentCreate",
    "CommentRepository",
    "CommentService",
    "CommentUpdate",
]
