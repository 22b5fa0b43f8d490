"""Shared user response models."""

from pydantic import BaseModel

from quill.domain.model import User

# Group assigned to self-registered accounts
DEFAULT_GROUP = "default"

PASSWORD_MIN_LENGTH = 8


class UserItem(BaseModel):
    """User in a response. ``email`` is only disclosed to editors."""

    id: str
    name: str
    group: str
    email: str | None = None

    @classmethod
    def from_domain(cls, user: User, show_email: bool = False) -> "UserItem":
        return cls(
            id=user.id,
            name=user.name,
            group=user.group,
            email=user.email if show_email else None,
        )
