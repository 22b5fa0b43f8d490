"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from quill.domain.model import Article, Comment, Group, Session, User
from quill.domain.value import (
    ArticleId,
    ArticleUrl,
    CommentId,
    GroupId,
    Permission,
    SessionId,
    UserId,
)


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert database row to Group domain model.

    Args:
        row: Database row as dict

    Returns:
        Group domain model
    """
    return Group(
        id=GroupId(row["id"]),
        permissions=frozenset(Permission(p) for p in row["permissions"]),
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    """Convert Group domain model to database dict."""
    return {
        "id": group.id,
        "permissions": sorted(p.value for p in group.permissions),
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row["email"],
        group=GroupId(row["group"]),
        password_hash=row.get("password_hash") or "",
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    ``password_hash`` is excluded from ``model_dump`` so it is added back
    explicitly here.
    """
    return {**user.model_dump(), "password_hash": user.password_hash}


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(row["id"]),
        title=row["title"],
        author=UserId(row["author"]),
        url=ArticleUrl(row["url"]),
        content=row["content"],
        date=row["date"],
        visible=row["visible"],
    )


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert database row to Session domain model."""
    return Session(
        id=SessionId(row["id"]),
        user=UserId(row["user"]),
        expires=row["expires"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        parent=CommentId(row["parent"]) if row.get("parent") is not None else None,
        article=ArticleId(row["article"]),
        author=UserId(row["author"]) if row.get("author") is not None else None,
        name=row.get("name"),
        content=row["content"],
        date=row["date"],
        visible=row["visible"],
    )
