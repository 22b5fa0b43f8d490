"""Repository interfaces for Quill domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quill.domain.repository.article import ArticleRepository
from quill.domain.repository.comment import CommentRepository
from quill.domain.repository.group import GroupRepository
from quill.domain.repository.session import SessionRepository
from quill.domain.repository.user import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "GroupRepository",
    "SessionRepository",
    "UserRepository",
]
