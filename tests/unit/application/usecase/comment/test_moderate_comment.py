"""Unit tests for hiding, restoring and purging comments."""

import pytest

from quill.application.usecase.comment import (
    GetCommentRequest,
    GetCommentUseCase,
    HideCommentUseCase,
    PurgeCommentRequest,
    PurgeCommentUseCase,
    RestoreCommentUseCase,
    SetCommentVisibilityRequest,
)
from quill.domain.error import HasChildrenError, NotAuthorizedError, NotFoundError
from quill.domain.repository import CommentRepository
from tests.factories import add_article, add_comment, login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestHideComment:
    @pytest.mark.asyncio
    async def test_author_hides_own_comment(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        comment = await add_comment(unit_env, article_id=1, author="dave")
        use_case = await unit_env.get(HideCommentUseCase)

        # Act
        response = await use_case.execute(
            SetCommentVisibilityRequest(comment_id=comment.id, session_id=dave.id)
        )

        # Assert
        assert response.comment.visible is False
        assert response.comment.content == comment.content

    @pytest.mark.asyncio
    async def test_hidden_comment_is_not_found_for_others(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        article = await add_article(unit_env, author="ann")
        comment = await add_comment(unit_env, article.id, author="dave")
        hide = await unit_env.get(HideCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)

        await hide.execute(
            SetCommentVisibilityRequest(comment_id=comment.id, session_id=dave.id)
        )

        with pytest.raises(NotFoundError):
            await get.execute(GetCommentRequest(comment_id=comment.id))
        own = await get.execute(
            GetCommentRequest(comment_id=comment.id, session_id=dave.id)
        )
        assert own.editable is True
        assert own.deletable is True

    @pytest.mark.asyncio
    async def test_foreign_comment_denied(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        comment = await add_comment(unit_env, article_id=1, author="carol")
        use_case = await unit_env.get(HideCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SetCommentVisibilityRequest(comment_id=comment.id, session_id=dave.id)
            )

    @pytest.mark.asyncio
    async def test_restore(self, unit_env):
        await seed_groups(unit_env)
        ann = await login(unit_env, "ann", "author")
        comment = await add_comment(unit_env, article_id=1, visible=False)
        use_case = await unit_env.get(RestoreCommentUseCase)

        response = await use_case.execute(
            SetCommentVisibilityRequest(comment_id=comment.id, session_id=ann.id)
        )

        assert response.comment.visible is True


class TestPurgeComment:
    """Purging is reserved for moderators."""

    @pytest.mark.asyncio
    async def test_moderator_purges_leaf(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        ann = await login(unit_env, "ann", "author")
        comment = await add_comment(unit_env, article_id=1)
        use_case = await unit_env.get(PurgeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        await use_case.execute(
            PurgeCommentRequest(comment_id=comment.id, session_id=ann.id)
        )

        # Assert
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_author_may_not_purge_own_comment(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        comment = await add_comment(unit_env, article_id=1, author="dave")
        use_case = await unit_env.get(PurgeCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                PurgeCommentRequest(comment_id=comment.id, session_id=dave.id)
            )

    @pytest.mark.asyncio
    async def test_comment_with_replies(self, unit_env):
        await seed_groups(unit_env)
        root = await login(unit_env, "root", "admin")
        parent = await add_comment(unit_env, article_id=1)
        await add_comment(unit_env, article_id=1, parent=parent.id)
        use_case = await unit_env.get(PurgeCommentUseCase)

        with pytest.raises(HasChildrenError):
            await use_case.execute(
                PurgeCommentRequest(comment_id=parent.id, session_id=root.id)
            )

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        await seed_groups(unit_env)
        root = await login(unit_env, "root", "admin")
        use_case = await unit_env.get(PurgeCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                PurgeCommentRequest(comment_id=1, session_id=root.id)
            )
