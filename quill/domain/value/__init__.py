"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    ArticleId,
    CommentId,
    GroupId,
    SessionId,
    UserId,
)
from quill.domain.value.types import ArticleUrl, Permission

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "GroupId",
    "SessionId",
    "UserId",
    # Types
    "ArticleUrl",
    "Permission",
]
