"""Domain model entities for Quill."""

from quill.domain.model.article import Article, ArticleChanges, NewArticle
from quill.domain.model.comment import (
    DELETED_NAME,
    Comment,
    CommentChanges,
    CommentNode,
    NewComment,
)
from quill.domain.model.group import Group
from quill.domain.model.session import Session
from quill.domain.model.user import User, UserProfile

__all__ = [
    "Article",
    "ArticleChanges",
    "NewArticle",
    "Comment",
    "CommentChanges",
    "CommentNode",
    "NewComment",
    "DELETED_NAME",
    "Group",
    "Session",
    "User",
    "UserProfile",
]
