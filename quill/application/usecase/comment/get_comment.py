"""Get single comment use case."""

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)
from quill.domain.value import CommentId

from .tree import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int
    session_id: str | None = None


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem
    editable: bool
    deletable: bool


class GetCommentUseCase:
    """Use case for getting one comment without its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.comment_service = comment_service
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        A comment the actor may not view, or one on an article the actor may
        not view, is reported as missing.

        Raises:
            NotFoundError: If the comment doesn't exist or isn't viewable
        """
        actor = await self.session_service.resolve(request.session_id)

        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        if comment is None or not await self.authorization_service.is_viewable(
            comment, actor
        ):
            raise NotFoundError("Comment", str(request.comment_id))

        article = await self.article_service.get_article(str(comment.article))
        if not await self.authorization_service.is_viewable(article, actor):
            raise NotFoundError("Comment", str(request.comment_id))

        return GetCommentResponse(
            comment=CommentItem.from_domain(comment),
            editable=await self.authorization_service.is_editable(comment, actor),
            deletable=await self.authorization_service.is_deletable(comment, actor),
        )
