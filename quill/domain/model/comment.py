"""Comment entity.

Comments are threaded replies on articles with unlimited depth. Threading
is expressed only through ``parent``; the tree is rebuilt from the flat
list on every read (see ``quill.domain.service.comment_tree``).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from quill.domain.model.common import DomainModel
from quill.domain.value import ArticleId, CommentId, UserId

# Display name given to comments whose author account was deleted
DELETED_NAME = "[deleted]"


def _check_authorship(author: Optional[UserId], name: Optional[str]) -> None:
    # Mirrors the chk_author database constraint: author xor name
    if (author is None) == (name is None):
        raise ValueError("Exactly one of author and name must be set")


class Comment(DomainModel):
    """Comment entity.

    A comment is either written by a registered user (``author`` set) or by a
    guest (``name`` set). Anonymized comments have ``author=None`` and the
    ``[deleted]`` sentinel as name.
    """

    id: CommentId
    parent: Optional[CommentId] = None
    article: ArticleId
    author: Optional[UserId] = None
    name: Optional[str] = None
    content: str
    date: datetime = Field(default_factory=datetime.now)
    visible: bool = True

    @model_validator(mode="after")
    def validate_authorship(self) -> "Comment":
        """Validate that exactly one of author and name is set."""
        _check_authorship(self.author, self.name)
        return self

    @property
    def is_guest(self) -> bool:
        """Whether the comment has no registered owner."""
        return self.author is None


class NewComment(DomainModel):
    """A comment to be inserted. ``id`` and ``date`` are assigned by the store."""

    parent: Optional[CommentId] = None
    article: ArticleId
    author: Optional[UserId] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=10000)
    visible: bool = True

    @model_validator(mode="after")
    def validate_authorship(self) -> "NewComment":
        """Validate that exactly one of author and name is set."""
        _check_authorship(self.author, self.name)
        return self


class CommentChanges(DomainModel):
    """Editable fields of a comment."""

    content: str = Field(min_length=1, max_length=10000)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)


@dataclass(frozen=True)
class CommentNode:
    """Node in a comment tree.

    Wraps one comment and its replies in store order.
    """

    comment: Comment
    children: tuple["CommentNode", ...] = ()
