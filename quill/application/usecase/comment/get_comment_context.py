"""Get comment context use case."""

from pydantic import BaseModel, Field

from quill.domain.error import NotFoundError
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)
from quill.domain.value import CommentId

from .tree import CommentNodeItem, present_node


class GetCommentContextRequest(BaseModel):
    """Get comment context request."""

    comment_id: int
    context: int = Field(default=0, ge=0)  # Parent levels to include
    session_id: str | None = None


class GetCommentContextResponse(BaseModel):
    """Get comment context response.

    ``root`` is the ancestor the walk ended on, not necessarily the
    requested comment.
    """

    comment_id: int
    root: CommentNodeItem


class GetCommentContextUseCase:
    """Use case for viewing a comment together with its parent chain."""

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

    async def execute(
        self, request: GetCommentContextRequest
    ) -> GetCommentContextResponse:
        """Execute get comment context flow.

        Raises:
            NotFoundError: If the comment doesn't exist or its article isn't
                viewable
        """
        actor = await self.session_service.resolve(request.session_id)

        node = await self.comment_service.get_comment_context(
            CommentId(request.comment_id), request.context
        )
        if node is None:
            raise NotFoundError("Comment", str(request.comment_id))

        # The whole chain lives on one article
        article = await self.article_service.get_article(str(node.comment.article))
        if not await self.authorization_service.is_viewable(article, actor):
            raise NotFoundError("Comment", str(request.comment_id))

        return GetCommentContextResponse(
            comment_id=request.comment_id,
            root=await present_node(node, actor, self.authorization_service),
        )
