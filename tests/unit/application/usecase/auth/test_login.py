"""Unit tests for LoginUseCase."""

import pytest

from quill.application.usecase.auth import LoginRequest, LoginUseCase
from quill.domain.error import InvalidCredentialsError
from quill.domain.model import User
from quill.domain.service import SessionService, UserService
from quill.domain.value import GroupId, UserId
from tests.factories import login, seed_groups
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def register(env, user_id: str, password: str) -> None:
    await seed_groups(env)
    user_service = await env.get(UserService)
    await user_service.create_user(
        User(
            id=UserId(user_id),
            name=user_id.title(),
            email=f"{user_id}@example.com",
            group=GroupId("default"),
        ),
        password,
    )


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_opens_session(self, unit_env):
        # Arrange
        await register(unit_env, "dave", "correct horse")
        use_case = await unit_env.get(LoginUseCase)
        session_service = await unit_env.get(SessionService)

        # Act
        response = await use_case.execute(
            LoginRequest(user_id="dave", password="correct horse")
        )

        # Assert
        assert response.user.id == "dave"
        assert response.user.email == "dave@example.com"
        session = await session_service.resolve(response.session_id)
        assert session.user == "dave"

    @pytest.mark.asyncio
    async def test_each_login_gets_a_new_session(self, unit_env):
        await register(unit_env, "dave", "correct horse")
        use_case = await unit_env.get(LoginUseCase)
        request = LoginRequest(user_id="dave", password="correct horse")

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.session_id != second.session_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        await register(unit_env, "dave", "correct horse")
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(
                LoginRequest(user_id="dave", password="battery staple")
            )

    @pytest.mark.asyncio
    async def test_unknown_user_gets_same_error(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await use_case.execute(LoginRequest(user_id="ghost", password="x"))

        assert str(exc_info.value) == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_account_without_password(self, unit_env):
        await seed_groups(unit_env)
        await login(unit_env, "dave")
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(LoginRequest(user_id="dave", password="x"))

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            LoginRequest(user_id="dave", password="")
