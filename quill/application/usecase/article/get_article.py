"""Get article use case."""

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)

from .common import ArticleItem


class GetArticleRequest(BaseModel):
    """Get article request."""

    id_or_url: str  # Numeric ID or pretty url
    session_id: str | None = None


class GetArticleResponse(BaseModel):
    """Get article response."""

    article: ArticleItem
    editable: bool
    comment_count: int


class GetArticleUseCase:
    """Use case for viewing one article."""

    def __init__(
        self,
        article_service: ArticleService,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.article_service = article_service
        self.comment_service = comment_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Unpublished articles are reported as missing to actors who may not
        edit them.

        Raises:
            NotFoundError: If the article doesn't exist or isn't viewable
        """
        actor = await self.session_service.resolve(request.session_id)

        article = await self.article_service.get_article(request.id_or_url)
        if not await self.authorization_service.is_viewable(article, actor):
            raise NotFoundError("Article", request.id_or_url)

        return GetArticleResponse(
            article=ArticleItem.from_domain(article),
            editable=await self.authorization_service.is_editable(article, actor),
            comment_count=await self.comment_service.count_for_article(article.id),
        )
