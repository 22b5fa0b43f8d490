"""Delete user use case."""

from pydantic import BaseModel

from quill.domain.error import NotAuthorizedError
from quill.domain.service import AuthorizationService, SessionService, UserService
from quill.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str
    purge_content: bool = False  # Also blank and hide the user's comments
    session_id: str | None = None


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: str
    # True if the actor deleted their own account and is now logged out
    logged_out: bool


class DeleteUserUseCase:
    """Use case for deleting an account.

    Comments survive the account, attributed to ``[deleted]``.
    """

    def __init__(
        self,
        user_service: UserService,
        authorization_service: AuthorizationService,
        session_service: SessionService,
    ) -> None:
        self.user_service = user_service
        self.authorization_service = authorization_service
        self.session_service = session_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If the user doesn't exist
            NotAuthorizedError: If the actor is neither the user nor holds
                DELETE_FOREIGN_USER
            BusinessRuleViolationError: If the user still authors articles
        """
        actor = await self.session_service.resolve(request.session_id)

        user = await self.user_service.get_by_id(UserId(request.user_id))
        if not await self.authorization_service.is_deletable(user, actor):
            raise NotAuthorizedError(
                "delete", "user", request.user_id, actor and actor.user
            )

        await self.user_service.delete_account(user.id, request.purge_content)
        return DeleteUserResponse(
            user_id=user.id,
            logged_out=actor is not None and actor.user == user.id,
        )
