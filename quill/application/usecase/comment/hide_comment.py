"""Hide and restore comment use cases."""

from pydantic import BaseModel

from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.model import Comment
from quill.domain.service import AuthorizationService, CommentService, SessionService
from quill.domain.value import CommentId

from .tree import CommentItem


class SetCommentVisibilityRequest(BaseModel):
    """Hide or restore comment request."""

    comment_id: int
    session_id: str | None = None


class SetCommentVisibilityResponse(BaseModel):
    """Hide or restore comment response."""

    comment: CommentItem


class _SetCommentVisibilityUseCase:
    action: str

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(
        self, request: SetCommentVisibilityRequest
    ) -> SetCommentVisibilityResponse:
        """Check the actor may delete the comment, then apply the change.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor may not delete the comment
        """
        actor = await self.session_service.resolve(request.session_id)
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if not await self.authorization_service.is_deletable(comment, actor):
            raise NotAuthorizedError(
                self.action, "comment", str(request.comment_id), actor and actor.user
            )

        updated = await self._apply(comment_id)
        return SetCommentVisibilityResponse(comment=CommentItem.from_domain(updated))

    async def _apply(self, comment_id: CommentId) -> Comment:
        raise NotImplementedError


class HideCommentUseCase(_SetCommentVisibilityUseCase):
    """Use case for soft deleting a comment."""

    action = "hide"

    async def _apply(self, comment_id: CommentId) -> Comment:
        return await self.comment_service.hide_comment(comment_id)


class RestoreCommentUseCase(_SetCommentVisibilityUseCase):
    """Use case for restoring a hidden comment."""

    action = "restore"

    async def _apply(self, comment_id: CommentId) -> Comment:
        return await self.comment_service.restore_comment(comment_id)
