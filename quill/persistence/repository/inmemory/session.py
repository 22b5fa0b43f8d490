"""In-memory session repository for testing."""

from typing import Optional

from quill.domain.model.session import Session
from quill.domain.repository.session import SessionRepository
from quill.domain.value import SessionId, UserId


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, Session] = {}

    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        """Find a session by its token."""
        return self._sessions.get(session_id)

    async def insert(self, session: Session) -> Session:
        """Store a session."""
        self._sessions[session.id] = session
        return session

    async def delete(self, session_id: SessionId) -> None:
        """Delete a session."""
        self._sessions.pop(session_id, None)

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every session of a user."""
        for session_id in [s.id for s in self._sessions.values() if s.user == user_id]:
            del self._sessions[session_id]
