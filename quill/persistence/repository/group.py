"""PostgreSQL implementation of Group repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Group
from quill.domain.repository import GroupRepository
from quill.domain.value import GroupId
from quill.persistence.mappers import group_to_dict, row_to_group
from quill.persistence.tables import groups_table


class PostgresGroupRepository(GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by name."""
        stmt = select(groups_table).where(groups_table.c.id == group_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_group(row._asdict()) if row else None

    async def save(self, group: Group) -> Group:
        """Create a group or replace its permissions."""
        values = group_to_dict(group)
        stmt = (
            insert(groups_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[groups_table.c.id],
                set_={"permissions": values["permissions"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return group
