"""Purge comment use case."""

from pydantic import BaseModel

from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.service import AuthorizationService, CommentService, SessionService
from quill.domain.value import CommentId


class PurgeCommentRequest(BaseModel):
    """Purge comment request."""

    comment_id: int
    session_id: str | None = None


class PurgeCommentUseCase:
    """Use case for permanently deleting a comment.

    Purging is a moderation action: it needs DELETE_FOREIGN_COMMENT even for
    the actor's own comments. Authors can only hide their comments.
    """

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: PurgeCommentRequest) -> None:
        """Execute purge comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor lacks DELETE_FOREIGN_COMMENT
            HasChildrenError: If the comment still has replies
        """
        actor = await self.session_service.resolve(request.session_id)
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if not await self.authorization_service.can_purge(comment, actor):
            raise NotAuthorizedError(
                "purge", "comment", str(request.comment_id), actor and actor.user
            )

        await self.comment_service.purge_comment(comment_id)
