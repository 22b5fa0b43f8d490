"""Unit tests for PermissionService."""

from datetime import datetime, timedelta

import pytest

from quill.domain.error import IntegrityError
from quill.domain.model import Session, User
from quill.domain.repository import UserRepository
from quill.domain.service import PermissionService
from quill.domain.value import GroupId, Permission, SessionId, UserId
from tests.factories import login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def orphan_session(user_id: str) -> Session:
    return Session(
        id=SessionId("orphan"),
        user=UserId(user_id),
        expires=datetime.now() + timedelta(days=1),
    )


class TestAllowed:
    """Tests for the plain permission check."""

    @pytest.mark.asyncio
    async def test_anonymous_has_no_permissions(self, unit_env):
        service = await unit_env.get(PermissionService)

        for permission in Permission:
            assert await service.allowed(None, permission) is False

    @pytest.mark.asyncio
    async def test_group_permissions(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "dave", "default")

        # Act & Assert
        assert await service.allowed(actor, Permission.CREATE_COMMENT) is True
        assert await service.allowed(actor, Permission.EDIT_COMMENT) is True
        assert await service.allowed(actor, Permission.EDIT_FOREIGN_COMMENT) is False
        assert await service.allowed(actor, Permission.CREATE_ARTICLE) is False

    @pytest.mark.asyncio
    async def test_all_is_a_wildcard(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "root", "admin")

        for permission in Permission:
            assert await service.allowed(actor, permission) is True

    @pytest.mark.asyncio
    async def test_missing_user_is_an_integrity_error(self, unit_env):
        """A session pointing at a deleted user is corrupt data, not a denial."""
        service = await unit_env.get(PermissionService)

        with pytest.raises(IntegrityError):
            await service.allowed(orphan_session("ghost"), Permission.CREATE_COMMENT)

    @pytest.mark.asyncio
    async def test_missing_group_is_an_integrity_error(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.insert(
            User(
                id=UserId("erin"),
                name="Erin",
                email="erin@example.com",
                group=GroupId("vanished"),
            )
        )
        service = await unit_env.get(PermissionService)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await service.allowed(orphan_session("erin"), Permission.CREATE_COMMENT)


class TestAllowedOwnOrForeign:
    """Tests for the own-or-foreign rule."""

    @pytest.mark.asyncio
    async def test_own_permission_needs_ownership(self, unit_env):
        # Arrange
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "dave", "default")

        # Act
        own = await service.allowed_own_or_foreign(
            actor,
            Permission.EDIT_FOREIGN_COMMENT,
            Permission.EDIT_COMMENT,
            UserId("dave"),
        )
        foreign = await service.allowed_own_or_foreign(
            actor,
            Permission.EDIT_FOREIGN_COMMENT,
            Permission.EDIT_COMMENT,
            UserId("carol"),
        )

        # Assert
        assert own is True
        assert foreign is False

    @pytest.mark.asyncio
    async def test_foreign_permission_is_sufficient(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "ann", "author")

        assert await service.allowed_own_or_foreign(
            actor,
            Permission.EDIT_FOREIGN_COMMENT,
            Permission.EDIT_COMMENT,
            UserId("carol"),
        )

    @pytest.mark.asyncio
    async def test_ownerless_resource_never_matches(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "dave", "default")

        assert not await service.allowed_own_or_foreign(
            actor, Permission.EDIT_FOREIGN_COMMENT, Permission.EDIT_COMMENT, None
        )

    @pytest.mark.asyncio
    async def test_owner_without_own_permission(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "nemo", "nobody")

        assert not await service.allowed_own_or_foreign(
            actor,
            Permission.EDIT_FOREIGN_COMMENT,
            Permission.EDIT_COMMENT,
            UserId("nemo"),
        )

    @pytest.mark.asyncio
    async def test_no_own_permission_means_ownership_suffices(self, unit_env):
        await seed_groups(unit_env)
        service = await unit_env.get(PermissionService)
        actor = await login(unit_env, "nemo", "nobody")

        assert await service.allowed_own_or_foreign(
            actor, Permission.EDIT_FOREIGN_USER, None, UserId("nemo")
        )
        assert not await service.allowed_own_or_foreign(
            actor, Permission.EDIT_FOREIGN_USER, None, UserId("dave")
        )

    @pytest.mark.asyncio
    async def test_anonymous_is_denied(self, unit_env):
        service = await unit_env.get(PermissionService)

        assert not await service.allowed_own_or_foreign(
            None, Permission.EDIT_FOREIGN_COMMENT, Permission.EDIT_COMMENT, None
        )
