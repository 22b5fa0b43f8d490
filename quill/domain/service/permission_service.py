"""Permission domain service."""

import logfire

from quill.domain.error import IntegrityError
from quill.domain.model import Group, Session
from quill.domain.repository import GroupRepository, UserRepository
from quill.domain.value import Permission, UserId

from .base import Service


class PermissionService(Service):
    """Evaluates capability checks for an actor.

    The actor is the requester's live session, or None for anonymous
    requests. Services are request-scoped, so a resolved group is reused for
    the rest of the request and never across requests.
    """

    def __init__(
        self, user_repository: UserRepository, group_repository: GroupRepository
    ) -> None:
        """Initialize permission service.

        Args:
            user_repository: User repository
            group_repository: Group repository
        """
        self.user_repository = user_repository
        self.group_repository = group_repository
        self._groups: dict[UserId, Group] = {}

    async def group_of(self, user_id: UserId) -> Group:
        """Resolve the permission group of a user.

        Args:
            user_id: User ID

        Returns:
            The user's group

        Raises:
            IntegrityError: If the user or their group doesn't exist
        """
        if user_id in self._groups:
            return self._groups[user_id]

        with logfire.span("permission_service.group_of", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.error("Session references missing user", user_id=user_id)
                raise IntegrityError(f"User {user_id} does not exist")

            group = await self.group_repository.find_by_id(user.group)
            if group is None:
                logfire.error(
                    "User references missing group", user_id=user_id, group=user.group
                )
                raise IntegrityError(
                    f"Group {user.group} of user {user_id} does not exist"
                )

            self._groups[user_id] = group
            return group

    async def allowed(self, actor: Session | None, permission: Permission) -> bool:
        """Check whether an actor holds a permission.

        Anonymous actors hold no permissions; no store query is made for them.

        Args:
            actor: Current session, None if anonymous
            permission: Permission to check

        Returns:
            True if the actor's group grants the permission
        """
        if actor is None:
            return False
        group = await self.group_of(actor.user)
        return group.has(permission)

    async def allowed_own_or_foreign(
        self,
        actor: Session | None,
        foreign: Permission,
        own: Permission | None,
        owner: UserId | None,
    ) -> bool:
        """Evaluate the own-or-foreign rule.

        ``foreign`` alone is sufficient regardless of ownership. ``own`` is
        only sufficient if the actor owns the resource. The foreign check is
        always evaluated first and short-circuits the rest.

        Args:
            actor: Current session, None if anonymous
            foreign: Blanket permission over everyone's resources
            own: Narrow permission over the actor's own resources. None means
                ownership alone is sufficient.
            owner: Owner of the resource, None for ownerless (guest) resources

        Returns:
            True if access is granted
        """
        if actor is None:
            return False
        if await self.allowed(actor, foreign):
            return True
        has_own = own is None or await self.allowed(actor, own)
        return has_own and owner is not None and actor.user == owner
