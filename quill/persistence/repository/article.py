"""PostgreSQL implementation of Article repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import ValidationError
from quill.domain.model import Article, ArticleChanges, NewArticle
from quill.domain.repository import ArticleRepository
from quill.domain.value import ArticleId, ArticleUrl, UserId
from quill.persistence.mappers import row_to_article
from quill.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_url(self, url: ArticleUrl) -> Optional[Article]:
        """Find an article by its pretty url."""
        stmt = select(articles_table).where(articles_table.c.url == url.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def list_page(
        self, limit: int, offset: int, include_hidden: bool = False
    ) -> List[Article]:
        """List articles, newest first."""
        stmt = select(articles_table)
        if not include_hidden:
            stmt = stmt.where(articles_table.c.visible.is_(True))

        stmt = (
            stmt.order_by(desc(articles_table.c.date), desc(articles_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def insert(self, article: NewArticle) -> Article:
        """Insert an article and return it with ID and date assigned."""
        await self._check_url_free(article.url)
        stmt = (
            articles_table.insert()
            .values(**article.model_dump())
            .returning(articles_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_article(row._asdict())

    async def update(
        self, article_id: ArticleId, changes: ArticleChanges
    ) -> Optional[Article]:
        """Update an article."""
        await self._check_url_free(changes.url, except_id=article_id)
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(**changes.model_dump())
            .returning(articles_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_article(row._asdict())

    async def count_by_author(self, author_id: UserId) -> int:
        """Count articles written by a user."""
        stmt = (
            select(func.count())
            .select_from(articles_table)
            .where(articles_table.c.author == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def _check_url_free(
        self, url: ArticleUrl, except_id: ArticleId | None = None
    ) -> None:
        existing = await self.find_by_url(url)
        if existing is not None and existing.id != except_id:
            raise ValidationError(f"Article url already in use: {url}")
