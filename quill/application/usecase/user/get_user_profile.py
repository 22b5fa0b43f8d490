"""Get user profile use case."""

from pydantic import BaseModel

from quill.application.usecase.comment.tree import CommentItem
from quill.domain.model import Comment, Session
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
    UserService,
)
from quill.domain.value import ArticleId, UserId

from .common import UserItem


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str
    session_id: str | None = None


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user: UserItem
    editable: bool
    deletable: bool
    comments: list[CommentItem]


class GetUserProfileUseCase:
    """Use case for a user's public profile and comment history."""

    def __init__(
        self,
        user_service: UserService,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            comment_service: Comment domain service
            article_service: Article domain service
            authorization_service: Authorization gate
            session_service: Session service for resolving the actor
        """
        self.user_service = user_service
        self.comment_service = comment_service
        self.article_service = article_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Only comments the actor may view, on articles the actor may view,
        are listed.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        actor = await self.session_service.resolve(request.session_id)

        user = await self.user_service.get_by_id(UserId(request.user_id))
        editable = await self.authorization_service.is_editable(user, actor)
        deletable = await self.authorization_service.is_deletable(user, actor)

        comments = await self.comment_service.comments_by_user(user.id)
        articles: dict[ArticleId, bool] = {}
        viewable = [
            comment
            for comment in comments
            if await self._is_listed(comment, actor, articles)
        ]

        return GetUserProfileResponse(
            user=UserItem.from_domain(user, show_email=editable),
            editable=editable,
            deletable=deletable,
            comments=[CommentItem.from_domain(comment) for comment in viewable],
        )

    async def _is_listed(
        self,
        comment: Comment,
        actor: Session | None,
        articles: dict[ArticleId, bool],
    ) -> bool:
        if not await self.authorization_service.is_viewable(comment, actor):
            return False
        # Article visibility, keyed by article id
        if comment.article not in articles:
            article = await self.article_service.get_article(str(comment.article))
            articles[comment.article] = await self.authorization_service.is_viewable(
                article, actor
            )
        return articles[comment.article]
