"""Create user use case."""

from pydantic import BaseModel, Field

from quill.config import FeatureSettings
from quill.domain.error import NotAuthorizedError
from quill.domain.model import User
from quill.domain.service import AuthorizationService, SessionService, UserService
from quill.domain.value import GroupId, Permission, UserId

from .common import DEFAULT_GROUP, PASSWORD_MIN_LENGTH, UserItem


class CreateUserRequest(BaseModel):
    """Create user request."""

    user_id: str = Field(min_length=1, max_length=255)  # Username
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, repr=False)
    group: str | None = None  # Only honoured for actors with CREATE_USER
    session_id: str | None = None


class CreateUserResponse(BaseModel):
    """Create user response."""

    user: UserItem
    # Set when an anonymous signup was logged in right away
    session_id: str | None = None


class CreateUserUseCase:
    """Use case for account creation.

    Actors holding CREATE_USER may create accounts in any group. Anonymous
    visitors may sign themselves up into the default group while signups
    are enabled, and are logged in straight away.
    """

    def __init__(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
        features: FeatureSettings,
    ) -> None:
        self.user_service = user_service
        self.authorization_service = authorization_service
        self.session_service = session_service
        self.features = features

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Raises:
            NotAuthorizedError: If the actor may not create accounts
            ValidationError: If the username is taken
            BusinessRuleViolationError: If the group doesn't exist
        """
        actor = await self.session_service.resolve(request.session_id)

        if actor is None:
            if not self.features.signups:
                raise NotAuthorizedError("create", "user", request.user_id, None)
            group = DEFAULT_GROUP
        elif await self.authorization_service.has_permission(
            actor, Permission.CREATE_USER
        ):
            group = request.group or DEFAULT_GROUP
        else:
            raise NotAuthorizedError("create", "user", request.user_id, actor.user)

        user = await self.user_service.create_user(
            User(
                id=UserId(request.user_id),
                name=request.name,
                email=request.email,
                group=GroupId(group),
            ),
            request.password,
        )

        session_id = None
        if actor is None:
            session = await self.session_service.open_session(user.id)
            session_id = session.id

        return CreateUserResponse(
            user=UserItem.from_domain(user, show_email=True),
            session_id=session_id,
        )
