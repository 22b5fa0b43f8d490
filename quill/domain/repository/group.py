"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.group import Group
from quill.domain.value import GroupId


class GroupRepository(ABC):
    """Repository for permission groups.

    Groups are managed by an administrator; the core only reads them.
    """

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by name."""
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Create or replace a group."""
        pass
