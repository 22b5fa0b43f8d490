"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel, field_validator

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single validated primitive.

    ``model_dump()`` returns the bare primitive, so wrapped values serialize
    the same as the raw column they come from.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


# Characters that aren't allowed in article urls
ILLEGAL_URL_CHARS = frozenset('^"&,@#$%+*:?;<>[]`{}')


class Permission(str, Enum):
    """Capability tokens granted to groups.

    The set is closed and mirrors the ``permission`` database enum.
    ``ALL`` is a wildcard that satisfies every check.
    """

    ALL = "all"
    CREATE_ARTICLE = "create_article"
    EDIT_ARTICLE = "edit_article"
    DELETE_ARTICLE = "delete_article"
    EDIT_FOREIGN_ARTICLE = "edit_foreign_article"
    DELETE_FOREIGN_ARTICLE = "delete_foreign_article"
    CREATE_COMMENT = "create_comment"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"
    EDIT_FOREIGN_COMMENT = "edit_foreign_comment"
    DELETE_FOREIGN_COMMENT = "delete_foreign_comment"
    CREATE_USER = "create_user"
    EDIT_FOREIGN_USER = "edit_foreign_user"
    DELETE_FOREIGN_USER = "delete_foreign_user"


class ArticleUrl(RootValueObject[str]):
    """Pretty url of an article.

    Examples: 'hello-world', 'notes/2019-06-09'
    """

    @field_validator("root")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate url is non-empty and free of reserved characters."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Article url must be 1-255 characters")
        if any(c in ILLEGAL_URL_CHARS for c in v):
            raise ValueError("Illegal character in article url")
        if v.isdigit():
            # Numeric urls would shadow lookups by id
            raise ValueError("Article url must not be purely numeric")
        return v
