"""Unit tests for the user profile use cases."""

import pytest

from quill.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from quill.domain.error import NotAuthorizedError, NotFoundError
from tests.factories import add_article, add_comment, login, seed_groups
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfile:
    @pytest.mark.asyncio
    async def test_public_profile(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        await add_article(unit_env, author="ann")
        await add_comment(unit_env, article_id=1, author="dave", content="shown")
        await add_comment(
            unit_env, article_id=1, author="dave", content="hidden", visible=False
        )
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id="dave"))

        # Assert
        assert response.user.name == "Dave"
        assert response.user.email is None
        assert response.editable is False
        assert [c.content for c in response.comments] == ["shown"]

    @pytest.mark.asyncio
    async def test_own_profile(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        await add_article(unit_env, author="ann")
        await add_comment(
            unit_env, article_id=1, author="dave", content="hidden", visible=False
        )
        use_case = await unit_env.get(GetUserProfileUseCase)

        response = await use_case.execute(
            GetUserProfileRequest(user_id="dave", session_id=dave.id)
        )

        assert response.user.email == "dave@example.com"
        assert response.editable is True
        assert response.deletable is True
        assert len(response.comments) == 1

    @pytest.mark.asyncio
    async def test_comments_on_drafts_are_not_listed(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        published = await add_article(unit_env, author="ann")
        draft = await add_article(unit_env, author="ann", url="draft", visible=False)
        await add_comment(unit_env, published.id, author="dave", content="public")
        await add_comment(unit_env, draft.id, author="dave", content="on a draft")
        use_case = await unit_env.get(GetUserProfileUseCase)

        response = await use_case.execute(GetUserProfileRequest(user_id="dave"))

        assert [c.content for c in response.comments] == ["public"]

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id="ghost"))


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_own_profile(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id="dave",
                name="David",
                email="david@example.com",
                session_id=dave.id,
            )
        )

        # Assert
        assert response.user.name == "David"
        assert response.user.email == "david@example.com"

    @pytest.mark.asyncio
    async def test_other_profile_denied(self, unit_env):
        await seed_groups(unit_env)
        dave = await login(unit_env, "dave")
        await login(unit_env, "carol")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateUserProfileRequest(
                    user_id="carol", name="Hacked", email="", session_id=dave.id
                )
            )

    @pytest.mark.asyncio
    async def test_admin_edits_anyone(self, unit_env):
        await seed_groups(unit_env)
        root = await login(unit_env, "root", "admin")
        await login(unit_env, "carol")
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id="carol", name="Caroline", email="", session_id=root.id
            )
        )

        assert response.user.name == "Caroline"
