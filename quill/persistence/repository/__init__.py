"""PostgreSQL repository implementations."""

from quill.persistence.repository.article import PostgresArticleRepository
from quill.persistence.repository.comment import PostgresCommentRepository
from quill.persistence.repository.group import PostgresGroupRepository
from quill.persistence.repository.session import PostgresSessionRepository
from quill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresGroupRepository",
    "PostgresSessionRepository",
    "PostgresUserRepository",
]
