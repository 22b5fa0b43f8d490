"""List articles use case."""

from pydantic import BaseModel, Field

from quill.config import ArticleSettings
from quill.domain.service import ArticleService, AuthorizationService, SessionService

from .common import ArticleItem


class ListArticlesRequest(BaseModel):
    """List articles request."""

    page: int = Field(default=1, ge=1)
    session_id: str | None = None


class ListArticlesResponse(BaseModel):
    """List articles response."""

    articles: list[ArticleItem]
    page: int
    page_size: int


class ListArticlesUseCase:
    """Use case for the paginated article index.

    Anonymous visitors see published articles only. Logged in actors also
    see the drafts they may edit.
    """

    def __init__(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        article_settings: ArticleSettings,
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
            authorization_service: Authorization gate
            session_service: Session service for resolving the actor
            article_settings: Listing configuration (page size)
        """
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service
        self.article_settings = article_settings

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow."""
        actor = await self.session_service.resolve(request.session_id)
        page_size = self.article_settings.page_size

        articles = await self.article_service.list_page(
            request.page, page_size, include_hidden=actor is not None
        )
        viewable = [
            article
            for article in articles
            if await self.authorization_service.is_viewable(article, actor)
        ]

        return ListArticlesResponse(
            articles=[ArticleItem.from_domain(article) for article in viewable],
            page=request.page,
            page_size=page_size,
        )
