"""Logout use case."""

from pydantic import BaseModel

from quill.domain.service import SessionService


class LogoutRequest(BaseModel):
    """Logout request."""

    session_id: str | None = None


class LogoutUseCase:
    """Use case for ending the current session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: LogoutRequest) -> None:
        """End the session if it is still live. Logging out twice is a no-op."""
        session = await self.session_service.resolve(request.session_id)
        if session is not None:
            await self.session_service.close_session(session.id)
