"""Shared article response models."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Article


class ArticleItem(BaseModel):
    """Article in a response."""

    id: int
    title: str
    author: str
    url: str
    content: str
    date: datetime
    visible: bool

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleItem":
        return cls(
            id=article.id,
            title=article.title,
            author=article.author,
            url=str(article.url),
            content=article.content,
            date=article.date,
            visible=article.visible,
        )
