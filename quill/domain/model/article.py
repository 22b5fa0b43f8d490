"""Article entity."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import ArticleId, ArticleUrl, UserId


class Article(DomainModel):
    """A blog post. Unpublished drafts have ``visible=False``."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=255)
    author: UserId
    url: ArticleUrl
    content: str
    date: datetime = Field(default_factory=datetime.now)
    visible: bool = False


class NewArticle(DomainModel):
    """An article to be inserted."""

    title: str = Field(min_length=1, max_length=255)
    author: UserId
    url: ArticleUrl
    content: str
    visible: bool = False


class ArticleChanges(DomainModel):
    """Editable fields of an article."""

    title: str = Field(min_length=1, max_length=255)
    url: ArticleUrl
    content: str
    visible: bool = False
