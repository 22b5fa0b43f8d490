"""User aggregate root."""

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import GroupId, UserId


class User(DomainModel):
    """A registered account.

    ``password_hash`` is an Argon2 hash set by ``UserService`` and is never
    serialized. An empty hash means the account has no password.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    group: GroupId
    password_hash: str = Field(default="", exclude=True, repr=False)


class UserProfile(DomainModel):
    """Editable profile fields of a user."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
