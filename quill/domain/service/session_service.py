"""Session domain service."""

import secrets
from datetime import datetime, timedelta

import logfire

from quill.domain.model import Session
from quill.domain.repository import SessionRepository
from quill.domain.value import SessionId, UserId

from .base import Service

# Bytes of randomness in a session token
SESSION_TOKEN_BYTES = 24


class SessionService(Service):
    """Creates, resolves and ends login sessions.

    Callers verify credentials (``UserService.authenticate``) before calling
    ``open_session``.
    """

    def __init__(
        self, session_repository: SessionRepository, lifetime: timedelta
    ) -> None:
        """Initialize session service.

        Args:
            session_repository: Session repository
            lifetime: How long a new session stays valid
        """
        self.session_repository = session_repository
        self.lifetime = lifetime

    async def open_session(self, user_id: UserId) -> Session:
        """Start a new session for an authenticated user."""
        with logfire.span("session_service.open_session", user_id=user_id):
            session = Session(
                id=SessionId(secrets.token_urlsafe(SESSION_TOKEN_BYTES)),
                user=user_id,
                expires=datetime.now() + self.lifetime,
            )
            saved = await self.session_repository.insert(session)
            logfire.info("Session opened", user_id=user_id, expires=saved.expires)
            return saved

    async def resolve(self, session_id: str | None) -> Session | None:
        """Look up the live session for a token.

        Expired sessions are deleted on sight.

        Args:
            session_id: Token from the session cookie, if any

        Returns:
            The live session, None if absent, unknown or expired
        """
        if not session_id:
            return None

        with logfire.span("session_service.resolve"):
            session = await self.session_repository.find_by_id(SessionId(session_id))
            if session is None:
                return None
            if session.is_expired():
                logfire.info("Session expired", user_id=session.user)
                await self.session_repository.delete(session.id)
                return None
            return session

    async def close_session(self, session_id: SessionId) -> None:
        """End a session (log out)."""
        with logfire.span("session_service.close_session"):
            await self.session_repository.delete(session_id)
            logfire.info("Session closed")
