"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .group import InMemoryGroupRepository
from .session import InMemorySessionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryGroupRepository",
    "InMemorySessionRepository",
    "InMemoryUserRepository",
]
