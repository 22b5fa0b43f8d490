"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import ValidationError
from quill.domain.model import User, UserProfile
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def insert(self, user: User) -> User:
        """Insert a new user."""
        if await self.find_by_id(user.id) is not None:
            raise ValidationError(f"Username already taken: {user.id}")

        stmt = users_table.insert().values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def update_profile(
        self, user_id: UserId, profile: UserProfile
    ) -> Optional[User]:
        """Update a user's display name and email."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(**profile.model_dump())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_user(row._asdict())

    async def update_password_hash(self, user_id: UserId, password_hash: str) -> bool:
        """Replace a user's stored password hash."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(password_hash=password_hash)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        stmt = users_table.delete().where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self) -> int:
        """Count registered users."""
        stmt = select(func.count()).select_from(users_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
