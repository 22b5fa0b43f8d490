"""Update article use case."""

from pydantic import BaseModel, Field

from quill.domain.error import NotAuthorizedError
from quill.domain.model import ArticleChanges
from quill.domain.service import ArticleService, AuthorizationService, SessionService
from quill.domain.value import ArticleId, ArticleUrl

from .common import ArticleItem


class UpdateArticleRequest(BaseModel):
    """Update article request."""

    article_id: int
    title: str = Field(min_length=1, max_length=255)
    url: str
    content: str
    visible: bool = False
    session_id: str | None = None


class UpdateArticleResponse(BaseModel):
    """Update article response."""

    article: ArticleItem


class UpdateArticleUseCase:
    """Use case for editing (and publishing) an article."""

    def __init__(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: UpdateArticleRequest) -> UpdateArticleResponse:
        """Execute update article flow.

        Raises:
            NotFoundError: If the article doesn't exist
            NotAuthorizedError: If the actor may not edit the article
        """
        actor = await self.session_service.resolve(request.session_id)

        article = await self.article_service.get_article(str(request.article_id))
        if not await self.authorization_service.is_editable(article, actor):
            raise NotAuthorizedError(
                "edit", "article", str(request.article_id), actor and actor.user
            )

        updated = await self.article_service.edit_article(
            ArticleId(article.id),
            ArticleChanges(
                title=request.title,
                url=ArticleUrl(request.url),
                content=request.content,
                visible=request.visible,
            ),
        )
        return UpdateArticleResponse(article=ArticleItem.from_domain(updated))
