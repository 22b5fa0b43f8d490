"""Get current user use case."""

from pydantic import BaseModel

from quill.domain.service import PermissionService, SessionService, UserService
from quill.domain.value import Permission


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    session_id: str | None = None  # Session cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str
    group: str
    permissions: list[Permission]


class GetCurrentUserUseCase:
    """Use case for getting the logged in user."""

    def __init__(
        self,
        session_service: SessionService,
        user_service: UserService,
        permission_service: PermissionService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            session_service: Session service for resolving the cookie
            user_service: User domain service
            permission_service: Permission service for the user's group
        """
        self.session_service = session_service
        self.user_service = user_service
        self.permission_service = permission_service

    async def execute(
        self, request: GetCurrentUserRequest
    ) -> GetCurrentUserResponse | None:
        """Execute get current user flow.

        Returns:
            The user behind the session, None if not logged in

        Raises:
            IntegrityError: If the session's user or group is missing
        """
        session = await self.session_service.resolve(request.session_id)
        if session is None:
            return None

        group = await self.permission_service.group_of(session.user)
        user = await self.user_service.get_by_id(session.user)

        return GetCurrentUserResponse(
            user_id=user.id,
            name=user.name,
            email=user.email,
            group=group.id,
            permissions=sorted(group.permissions, key=lambda p: p.value),
        )
