"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.session import Session
from quill.domain.value import SessionId, UserId


class SessionRepository(ABC):
    """Repository for login sessions."""

    @abstractmethod
    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        """Find a session by its token."""
        pass

    @abstractmethod
    async def insert(self, session: Session) -> Session:
        """Store a new session."""
        pass

    @abstractmethod
    async def delete(self, session_id: SessionId) -> None:
        """Delete a session."""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every session of a user."""
        pass
