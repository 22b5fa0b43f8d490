"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.article import Article, ArticleChanges, NewArticle
from quill.domain.value import ArticleId, ArticleUrl, UserId


class ArticleRepository(ABC):
    """Repository for Article entity."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def find_by_url(self, url: ArticleUrl) -> Optional[Article]:
        """Find an article by its pretty url."""
        pass

    @abstractmethod
    async def list_page(
        self, limit: int, offset: int, include_hidden: bool = False
    ) -> List[Article]:
        """List articles, newest first.

        Args:
            limit: Maximum number of articles to return
            offset: Number of articles to skip
            include_hidden: Whether to include unpublished articles

        Returns:
            List of articles
        """
        pass

    @abstractmethod
    async def insert(self, article: NewArticle) -> Article:
        """Insert a new article.

        Raises:
            ValidationError: If the url is already taken
        """
        pass

    @abstractmethod
    async def update(
        self, article_id: ArticleId, changes: ArticleChanges
    ) -> Optional[Article]:
        """Update an article, returning None if it doesn't exist."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count articles written by a user."""
        pass
