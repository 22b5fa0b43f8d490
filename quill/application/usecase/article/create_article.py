"""Create article use case."""

from pydantic import BaseModel, Field

from quill.domain.error import NotAuthorizedError
from quill.domain.model import NewArticle
from quill.domain.service import ArticleService, AuthorizationService, SessionService
from quill.domain.value import ArticleUrl, Permission

from .common import ArticleItem


class CreateArticleRequest(BaseModel):
    """Create article request."""

    title: str = Field(min_length=1, max_length=255)
    url: str
    content: str
    visible: bool = False
    session_id: str | None = None


class CreateArticleResponse(BaseModel):
    """Create article response."""

    article: ArticleItem


class CreateArticleUseCase:
    """Use case for writing a new article."""

    def __init__(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute create article flow.

        Raises:
            NotAuthorizedError: If the actor lacks CREATE_ARTICLE
            ValueError: If the url is malformed
            ValidationError: If the url is already taken
        """
        actor = await self.session_service.resolve(request.session_id)
        if actor is None or not await self.authorization_service.has_permission(
            actor, Permission.CREATE_ARTICLE
        ):
            raise NotAuthorizedError(
                "create", "article", request.url, actor and actor.user
            )

        article = await self.article_service.submit_article(
            NewArticle(
                title=request.title,
                author=actor.user,
                url=ArticleUrl(request.url),
                content=request.content,
                visible=request.visible,
            )
        )
        return CreateArticleResponse(article=ArticleItem.from_domain(article))
