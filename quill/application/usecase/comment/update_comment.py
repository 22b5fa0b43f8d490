"""Update comment use case."""

from pydantic import BaseModel, Field

from quill.domain.error import NotAuthorizedError, NotFoundError
from quill.domain.model import CommentChanges
from quill.domain.service import AuthorizationService, CommentService, SessionService
from quill.domain.value import CommentId

from .tree import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    content: str = Field(min_length=1, max_length=10000)
    name: str | None = None  # Applied to guest comments only
    session_id: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the actor may not edit the comment
        """
        actor = await self.session_service.resolve(request.session_id)
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if not await self.authorization_service.is_editable(comment, actor):
            raise NotAuthorizedError(
                "edit", "comment", str(request.comment_id), actor and actor.user
            )

        updated = await self.comment_service.edit_comment(
            comment_id, CommentChanges(content=request.content, name=request.name)
        )
        return UpdateCommentResponse(comment=CommentItem.from_domain(updated))
