"""In-memory group repository for testing."""

from typing import Optional

from quill.domain.model.group import Group
from quill.domain.repository.group import GroupRepository
from quill.domain.value import GroupId


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[GroupId, Group] = {}

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by name."""
        return self._groups.get(group_id)

    async def save(self, group: Group) -> Group:
        """Create or replace a group."""
        self._groups[group.id] = group
        return group
