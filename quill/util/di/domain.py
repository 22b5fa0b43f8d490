"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from quill.config import Settings
from quill.domain.repository import (
    ArticleRepository,
    CommentRepository,
    GroupRepository,
    SessionRepository,
    UserRepository,
)
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    PermissionService,
    SessionService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction,
    so the permission service's group memo never outlives a request.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_permission_service(
        self, user_repository: UserRepository, group_repository: GroupRepository
    ) -> PermissionService:
        """Provide permission domain service."""
        return PermissionService(
            user_repository=user_repository, group_repository=group_repository
        )

    @provide
    def get_authorization_service(
        self, permission_service: PermissionService
    ) -> AuthorizationService:
        """Provide authorization gate."""
        return AuthorizationService(permission_service=permission_service)

    @provide
    def get_session_service(
        self, session_repository: SessionRepository, settings: Settings
    ) -> SessionService:
        """Provide login session domain service."""
        return SessionService(
            session_repository=session_repository,
            lifetime=timedelta(days=settings.sessions.lifetime_days),
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        group_repository: GroupRepository,
        article_repository: ArticleRepository,
        session_repository: SessionRepository,
        comment_service: CommentService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            group_repository=group_repository,
            article_repository=article_repository,
            session_repository=session_repository,
            comment_service=comment_service,
        )
