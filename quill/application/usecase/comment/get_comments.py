"""Get comments use case."""

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)
from quill.domain.service.comment_tree import count_nodes

from .tree import CommentNodeItem, present_forest


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: int
    session_id: str | None = None  # Session cookie (optional)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: int
    comments: list[CommentNodeItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the comment tree of an article."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            authorization_service: Authorization gate
            session_service: Session service for resolving the actor
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with article ID and optional session

        Returns:
            Comment forest annotated for the actor

        Raises:
            NotFoundError: If the article doesn't exist or isn't viewable
        """
        actor = await self.session_service.resolve(request.session_id)

        article = await self.article_service.get_article(str(request.article_id))
        if not await self.authorization_service.is_viewable(article, actor):
            raise NotFoundError("Article", str(request.article_id))

        forest = await self.comment_service.get_comment_tree(article.id)

        return GetCommentsResponse(
            article_id=article.id,
            comments=await present_forest(forest, actor, self.authorization_service),
            total=count_nodes(forest),
        )
