"""Article domain service."""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import Article, ArticleChanges, NewArticle
from quill.domain.repository import ArticleRepository
from quill.domain.value import ArticleId, ArticleUrl

from .base import Service


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_article(self, id_or_url: str) -> Article:
        """Get an article by numeric ID or by pretty url.

        Args:
            id_or_url: Article ID as a string, or the article's url

        Returns:
            The article

        Raises:
            NotFoundError: If no article matches
        """
        with logfire.span("article_service.get_article", id_or_url=id_or_url):
            if id_or_url.isdigit():
                article = await self.article_repository.find_by_id(
                    ArticleId(int(id_or_url))
                )
            else:
                try:
                    url = ArticleUrl(id_or_url)
                except ValueError:
                    raise NotFoundError("Article", id_or_url)
                article = await self.article_repository.find_by_url(url)

            if article is None:
                logfire.warn("Article not found", id_or_url=id_or_url)
                raise NotFoundError("Article", id_or_url)
            return article

    async def list_page(
        self, page: int, page_size: int, include_hidden: bool = False
    ) -> list[Article]:
        """List one page of articles, newest first.

        Args:
            page: 1-based page number
            page_size: Articles per page
            include_hidden: Whether to include unpublished articles

        Returns:
            Articles on the page
        """
        with logfire.span("article_service.list_page", page=page):
            page = max(page, 1)
            articles = await self.article_repository.list_page(
                limit=page_size,
                offset=(page - 1) * page_size,
                include_hidden=include_hidden,
            )
            logfire.info("Articles listed", page=page, count=len(articles))
            return articles

    async def submit_article(self, new_article: NewArticle) -> Article:
        """Store a new article."""
        with logfire.span(
            "article_service.submit_article",
            url=str(new_article.url),
            author=new_article.author,
        ):
            article = await self.article_repository.insert(new_article)
            logfire.info(
                "Article submitted", article_id=article.id, visible=article.visible
            )
            return article

    async def edit_article(
        self, article_id: ArticleId, changes: ArticleChanges
    ) -> Article:
        """Edit an article.

        Raises:
            NotFoundError: If the article doesn't exist
        """
        with logfire.span("article_service.edit_article", article_id=article_id):
            updated = await self.article_repository.update(article_id, changes)
            if updated is None:
                logfire.warn("Article not found for edit", article_id=article_id)
                raise NotFoundError("Article", str(article_id))
            logfire.info(
                "Article edited", article_id=article_id, visible=updated.visible
            )
            return updated
