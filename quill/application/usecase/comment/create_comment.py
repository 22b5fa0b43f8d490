"""Create comment use case."""

from pydantic import BaseModel, Field

from quill.config import FeatureSettings
from quill.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quill.domain.model import NewComment
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)
from quill.domain.value import ArticleId, CommentId, Permission

from .tree import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: int
    parent_id: int | None = None  # None for top-level comments
    content: str = Field(min_length=1, max_length=10000)
    name: str | None = None  # Display name, guests only
    session_id: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for submitting a comment or a reply.

    Registered users need CREATE_COMMENT. Anonymous visitors may comment
    under a display name while guest comments are enabled.
    """

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        features: FeatureSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            authorization_service: Authorization gate
            session_service: Session service for resolving the actor
            features: Feature switches (guest comments)
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service
        self.features = features

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotAuthorizedError: If the actor may not comment
            NotFoundError: If the article doesn't exist or isn't viewable
            ValidationError: If a guest gives no name or the parent is invalid
        """
        actor = await self.session_service.resolve(request.session_id)

        if actor is None:
            if not self.features.guest_comments:
                raise NotAuthorizedError(
                    "create", "comment", f"on article {request.article_id}", None
                )
            if not request.name:
                raise ValidationError("Guest comments need a name")
        elif not await self.authorization_service.has_permission(
            actor, Permission.CREATE_COMMENT
        ):
            raise NotAuthorizedError(
                "create", "comment", f"on article {request.article_id}", actor.user
            )

        article = await self.article_service.get_article(str(request.article_id))
        if not await self.authorization_service.is_viewable(article, actor):
            raise NotFoundError("Article", str(request.article_id))

        comment = await self.comment_service.submit_comment(
            NewComment(
                parent=CommentId(request.parent_id)
                if request.parent_id is not None
                else None,
                article=ArticleId(article.id),
                author=actor.user if actor else None,
                name=None if actor else request.name,
                content=request.content,
            )
        )
        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
