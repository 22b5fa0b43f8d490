"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.article import (
    CreateArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    UpdateArticleUseCase,
)
from quill.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from quill.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentContextUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    HideCommentUseCase,
    PurgeCommentUseCase,
    RestoreCommentUseCase,
    UpdateCommentUseCase,
)
from quill.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from quill.config import ArticleSettings, FeatureSettings
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    PermissionService,
    SessionService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        session_service: SessionService,
        user_service: UserService,
        permission_service: PermissionService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            session_service=session_service,
            user_service=user_service,
            permission_service=permission_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, session_service: SessionService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, session_service: SessionService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(session_service=session_service)

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_list_articles_use_case(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        article_settings: ArticleSettings,
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
            article_settings=article_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_article_use_case(
        self,
        article_service: ArticleService,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(
            article_service=article_service,
            comment_service=comment_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_article_use_case(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_article_use_case(
        self,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_context_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> GetCommentContextUseCase:
        """Provide get comment context use case."""
        return GetCommentContextUseCase(
            comment_service=comment_service,
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> GetCommentUseCase:
        """Provide get single comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        features: FeatureSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
            features=features,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_hide_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> HideCommentUseCase:
        """Provide hide comment use case."""
        return HideCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_restore_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> RestoreCommentUseCase:
        """Provide restore comment use case."""
        return RestoreCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_purge_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> PurgeCommentUseCase:
        """Provide purge comment use case."""
        return PurgeCommentUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        features: FeatureSettings,
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(
            user_service=user_service,
            authorization_service=authorization_service,
            session_service=session_service,
            features=features,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self,
        user_service: UserService,
        comment_service: CommentService,
        article_service: ArticleService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            comment_service=comment_service,
            article_service=article_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            user_service=user_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(
            user_service=user_service,
            authorization_service=authorization_service,
            session_service=session_service,
        )
