"""In-memory article repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from quill.domain.error import ValidationError
from quill.domain.model.article import Article, ArticleChanges, NewArticle
from quill.domain.repository.article import ArticleRepository
from quill.domain.value import ArticleId, ArticleUrl, UserId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}
        self._ids = count(1)

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_url(self, url: ArticleUrl) -> Optional[Article]:
        """Find an article by its pretty url."""
        for article in self._articles.values():
            if article.url == url:
                return article
        return None

    async def list_page(
        self, limit: int, offset: int, include_hidden: bool = False
    ) -> list[Article]:
        """List articles, newest first."""
        articles = list(self._articles.values())
        if not include_hidden:
            articles = [a for a in articles if a.visible]
        articles.sort(key=lambda a: (a.date, a.id), reverse=True)
        return articles[offset : offset + limit]

    async def insert(self, article: NewArticle) -> Article:
        """Insert an article, assigning the next serial ID."""
        self._check_url_free(article.url)
        stored = Article(
            id=ArticleId(next(self._ids)),
            date=datetime.now(),
            **article.model_dump(exclude={"url"}),
            url=article.url,
        )
        self._articles[stored.id] = stored
        return stored

    async def update(
        self, article_id: ArticleId, changes: ArticleChanges
    ) -> Optional[Article]:
        """Update an article."""
        article = self._articles.get(article_id)
        if article is None:
            return None
        self._check_url_free(changes.url, except_id=article_id)
        self._articles[article_id] = article.model_copy(
            update={
                "title": changes.title,
                "url": changes.url,
                "content": changes.content,
                "visible": changes.visible,
            }
        )
        return self._articles[article_id]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count articles written by a user."""
        return sum(1 for a in self._articles.values() if a.author == author_id)

    def _check_url_free(
        self, url: ArticleUrl, except_id: ArticleId | None = None
    ) -> None:
        for article in self._articles.values():
            if article.url == url and article.id != except_id:
                raise ValidationError(f"Article url already in use: {url}")
