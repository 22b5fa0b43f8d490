"""PostgreSQL implementation of Session repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Session
from quill.domain.repository import SessionRepository
from quill.domain.value import SessionId, UserId
from quill.persistence.mappers import row_to_session
from quill.persistence.tables import sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        """Find a login session by its token."""
        stmt = select(sessions_table).where(sessions_table.c.id == session_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_session(row._asdict()) if row else None

    async def insert(self, session: Session) -> Session:
        """Store a login session."""
        stmt = sessions_table.insert().values(**session.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return session

    async def delete(self, session_id: SessionId) -> None:
        """Delete a login session."""
        stmt = sessions_table.delete().where(sessions_table.c.id == session_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every login session of a user."""
        stmt = sessions_table.delete().where(sessions_table.c.user == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
