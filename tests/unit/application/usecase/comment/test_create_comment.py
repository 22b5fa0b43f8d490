"""Unit tests for CreateCommentUseCase."""

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.config import FeatureSettings
from quill.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quill.domain.service import (
    ArticleService,
    AuthorizationService,
    CommentService,
    SessionService,
)
from tests.factories import add_article, add_comment, login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def build_use_case(env, features: FeatureSettings) -> CreateCommentUseCase:
    return CreateCommentUseCase(
        comment_service=await env.get(CommentService),
        article_service=await env.get(ArticleService),
        authorization_service=await env.get(AuthorizationService),
        session_service=await env.get(SessionService),
        features=features,
    )


class TestGuestComments:
    """Anonymous visitors comment under a display name."""

    @pytest.mark.asyncio
    async def test_guest_comment(self, unit_env):
        # Arrange
        article = await add_article(unit_env, author="ann")
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(article_id=article.id, content="Hi", name="Bob")
        )

        # Assert
        assert response.comment.author is None
        assert response.comment.name == "Bob"
        assert response.comment.visible is True

    @pytest.mark.asyncio
    async def test_guest_needs_a_name(self, unit_env):
        article = await add_article(unit_env, author="ann")
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(article_id=article.id, content="Hi")
            )

    @pytest.mark.asyncio
    async def test_guest_comments_disabled(self, unit_env):
        article = await add_article(unit_env, author="ann")
        use_case = await build_use_case(
            unit_env, FeatureSettings(guest_comments=False)
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                CreateCommentRequest(article_id=article.id, content="Hi", name="Bob")
            )


class TestRegisteredComments:
    @pytest.mark.asyncio
    async def test_author_is_the_actor(self, unit_env):
        """Registered comments carry the author and never a guest name."""
        # Arrange
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        article = await add_article(unit_env, author="ann")
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id,
                content="Hi",
                name="Someone else",
                session_id=dave.id,
            )
        )

        # Assert
        assert response.comment.author == "dave"
        assert response.comment.name is None

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        article = await add_article(unit_env, author="ann")
        parent = await add_comment(unit_env, article.id)
        use_case = await unit_env.get(CreateCommentUseCase)

        response = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id,
                parent_id=parent.id,
                content="Reply",
                session_id=dave.id,
            )
        )

        assert response.comment.parent == parent.id

    @pytest.mark.asyncio
    async def test_missing_permission(self, unit_env):
        await seed_groups(unit_env)
        nemo = await login(unit_env, "nemo", "nobody")
        article = await add_article(unit_env, author="ann")
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id, content="Hi", session_id=nemo.id
                )
            )

    @pytest.mark.asyncio
    async def test_draft_article(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        article = await add_article(unit_env, author="ann", visible=False)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id, content="Hi", session_id=dave.id
                )
            )
