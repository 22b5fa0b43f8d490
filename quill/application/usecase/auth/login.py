"""Login use case."""

from pydantic import BaseModel, Field

from quill.application.usecase.user.common import UserItem
from quill.domain.error import InvalidCredentialsError
from quill.domain.service import SessionService, UserService
from quill.domain.value import UserId


class LoginRequest(BaseModel):
    """Login request."""

    user_id: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, repr=False)


class LoginResponse(BaseModel):
    """Login response."""

    user: UserItem
    session_id: str


class LoginUseCase:
    """Use case for exchanging a username and password for a session."""

    def __init__(
        self, user_service: UserService, session_service: SessionService
    ) -> None:
        self.user_service = user_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the user doesn't exist or the password
                is wrong
        """
        user = await self.user_service.authenticate(
            UserId(request.user_id), request.password
        )
        if user is None:
            raise InvalidCredentialsError()

        session = await self.session_service.open_session(user.id)
        return LoginResponse(
            user=UserItem.from_domain(user, show_email=True),
            session_id=session.id,
        )
