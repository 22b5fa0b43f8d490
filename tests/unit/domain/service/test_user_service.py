"""Unit tests for UserService."""

import pytest

from quill.domain.error import BusinessRuleViolationError, NotFoundError
from quill.domain.model import DELETED_NAME, User, UserProfile
from quill.domain.repository import SessionRepository
from quill.domain.service import CommentService, UserService
from quill.domain.value import GroupId, SessionId, UserId
from tests.factories import add_article, add_comment, login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(UserService)

        created = await service.create_user(
            User(
                id=UserId("dave"),
                name="Dave",
                email="dave@example.com",
                group=GroupId("default"),
            ),
            "correct horse",
        )

        assert created.id == "dave"
        assert await service.count() == 1
        assert created.password_hash.startswith("$argon2")
        assert "correct horse" not in created.password_hash

    @pytest.mark.asyncio
    async def test_unknown_group(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(BusinessRuleViolationError):
            await service.create_user(
                User(
                    id=UserId("dave"),
                    name="Dave",
                    email="dave@example.com",
                    group=GroupId("missing"),
                ),
                "correct horse",
            )


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_matching_password(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        service = await unit_env.get(UserService)
        await service.create_user(
            User(id=UserId("dave"), name="Dave", email="", group=GroupId("default")),
            "correct horse",
        )

        # Act
        user = await service.authenticate(UserId("dave"), "correct horse")

        # Assert
        assert user is not None
        assert user.id == "dave"

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(UserService)
        await service.create_user(
            User(id=UserId("dave"), name="Dave", email="", group=GroupId("default")),
            "correct horse",
        )

        assert await service.authenticate(UserId("dave"), "battery staple") is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)

        assert await service.authenticate(UserId("ghost"), "anything") is None

    @pytest.mark.asyncio
    async def test_account_without_password(self, unit_env):
        """Accounts stored without a hash can't be logged into."""
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        service = await unit_env.get(UserService)

        assert await service.authenticate(UserId("dave"), "") is None


class TestSetPassword:
    @pytest.mark.asyncio
    async def test_reset(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        service = await unit_env.get(UserService)

        await service.set_password(UserId("dave"), "new secret")

        assert await service.authenticate(UserId("dave"), "new secret") is not None

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.set_password(UserId("ghost"), "new secret")


class TestEditProfile:
    @pytest.mark.asyncio
    async def test_edit(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        service = await unit_env.get(UserService)

        updated = await service.edit_profile(
            UserId("dave"), UserProfile(name="David", email="david@example.com")
        )

        assert updated.name == "David"
        assert updated.group == "default"

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.edit_profile(
                UserId("ghost"), UserProfile(name="Ghost", email="")
            )


class TestDeleteAccount:
    """Tests for delete_account."""

    @pytest.mark.asyncio
    async def test_comments_are_anonymized(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        session = await login(unit_env, "dave")
        comment = await add_comment(unit_env, article_id=1, author="dave")
        service = await unit_env.get(UserService)
        comment_service = await unit_env.get(CommentService)
        session_repo = await unit_env.get(SessionRepository)

        # Act
        await service.delete_account(UserId("dave"), purge_content=False)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId("dave"))
        assert await session_repo.find_by_id(session.id) is None
        anonymized = await comment_service.get_comment(comment.id)
        assert anonymized.author is None
        assert anonymized.name == DELETED_NAME
        assert anonymized.content == "A comment"

    @pytest.mark.asyncio
    async def test_purge_content(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        comment = await add_comment(unit_env, article_id=1, author="dave")
        service = await unit_env.get(UserService)
        comment_service = await unit_env.get(CommentService)

        await service.delete_account(UserId("dave"), purge_content=True)

        anonymized = await comment_service.get_comment(comment.id)
        assert anonymized.content == ""
        assert anonymized.visible is False

    @pytest.mark.asyncio
    async def test_article_authors_are_kept(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "ann", "author")
        await add_article(unit_env, author="ann")
        service = await unit_env.get(UserService)
        session_repo = await unit_env.get(SessionRepository)

        with pytest.raises(BusinessRuleViolationError):
            await service.delete_account(UserId("ann"), purge_content=False)

        assert await service.get_by_id(UserId("ann"))
        assert await session_repo.find_by_id(SessionId("token-ann")) is not None

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.delete_account(UserId("ghost"), purge_content=False)
