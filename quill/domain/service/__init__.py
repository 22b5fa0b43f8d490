"""Domain services."""

from .article_service import ArticleService
from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .permission_service import PermissionService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "AuthorizationService",
    "CommentService",
    "PermissionService",
    "Service",
    "SessionService",
    "UserService",
]
