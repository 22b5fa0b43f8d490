"""Permission group entity."""

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import GroupId, Permission


class Group(DomainModel):
    """Named bundle of permissions assigned to users."""

    id: GroupId
    permissions: frozenset[Permission] = Field(default_factory=frozenset)

    def has(self, permission: Permission) -> bool:
        """Check whether the group grants a permission.

        ``Permission.ALL`` grants every permission.
        """
        return permission in self.permissions or Permission.ALL in self.permissions
