"""Update user profile use case."""

from pydantic import BaseModel, Field

from quill.domain.error import NotAuthorizedError
from quill.domain.model import UserProfile
from quill.domain.service import AuthorizationService, SessionService, UserService
from quill.domain.value import UserId

from .common import UserItem


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    session_id: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user: UserItem


class UpdateUserProfileUseCase:
    """Use case for editing a user's profile."""

    def __init__(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.user_service = user_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If the user doesn't exist
            NotAuthorizedError: If the actor is neither the user nor holds
                EDIT_FOREIGN_USER
        """
        actor = await self.session_service.resolve(request.session_id)

        user = await self.user_service.get_by_id(UserId(request.user_id))
        if not await self.authorization_service.is_editable(user, actor):
            raise NotAuthorizedError(
                "edit", "user", request.user_id, actor and actor.user
            )

        updated = await self.user_service.edit_profile(
            user.id, UserProfile(name=request.name, email=request.email)
        )
        return UpdateUserProfileResponse(
            user=UserItem.from_domain(updated, show_email=True)
        )
