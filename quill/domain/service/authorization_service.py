"""Authorization gate for articles, comments and users."""

from dataclasses import dataclass

from quill.domain.model import Article, Comment, Session, User
from quill.domain.value import Permission, UserId

from .base import Service
from .permission_service import PermissionService

Entity = Article | Comment | User


@dataclass(frozen=True)
class AccessRule:
    """Permission pairs guarding one entity type.

    ``own_*`` set to None means owning the entity is sufficient by itself.
    """

    edit_foreign: Permission
    edit_own: Permission | None
    delete_foreign: Permission
    delete_own: Permission | None


ACCESS_RULES: dict[type, AccessRule] = {
    Article: AccessRule(
        edit_foreign=Permission.EDIT_FOREIGN_ARTICLE,
        edit_own=Permission.EDIT_ARTICLE,
        delete_foreign=Permission.DELETE_FOREIGN_ARTICLE,
        delete_own=Permission.DELETE_ARTICLE,
    ),
    Comment: AccessRule(
        edit_foreign=Permission.EDIT_FOREIGN_COMMENT,
        edit_own=Permission.EDIT_COMMENT,
        delete_foreign=Permission.DELETE_FOREIGN_COMMENT,
        delete_own=Permission.DELETE_COMMENT,
    ),
    # Users always manage their own account
    User: AccessRule(
        edit_foreign=Permission.EDIT_FOREIGN_USER,
        edit_own=None,
        delete_foreign=Permission.DELETE_FOREIGN_USER,
        delete_own=None,
    ),
}


def owner_of(entity: Entity) -> UserId | None:
    """Return the user owning an entity, None for guest comments."""
    if isinstance(entity, User):
        return entity.id
    return entity.author


def _rule_for(entity: Entity) -> AccessRule:
    rule = ACCESS_RULES.get(type(entity))
    if rule is None:
        raise TypeError(f"No access rule for {type(entity).__name__}")
    return rule


class AuthorizationService(Service):
    """Per-entity visibility and editability predicates.

    Predicates only report booleans. Turning a denial into an error is the
    caller's job.
    """

    def __init__(self, permission_service: PermissionService) -> None:
        """Initialize authorization service.

        Args:
            permission_service: Permission service for capability checks
        """
        self.permission_service = permission_service

    async def is_viewable(self, entity: Entity, actor: Session | None) -> bool:
        """Check whether an actor may see an entity.

        Visible entities are viewable by everyone, anonymous actors included.
        Hidden ones (unpublished articles, soft-deleted comments) remain
        viewable to whoever may edit them.
        """
        _rule_for(entity)
        if isinstance(entity, User) or entity.visible:
            return True
        return await self.is_editable(entity, actor)

    async def is_editable(self, entity: Entity, actor: Session | None) -> bool:
        """Check whether an actor may edit an entity."""
        rule = _rule_for(entity)
        return await self.permission_service.allowed_own_or_foreign(
            actor, rule.edit_foreign, rule.edit_own, owner_of(entity)
        )

    async def is_deletable(self, entity: Entity, actor: Session | None) -> bool:
        """Check whether an actor may delete (or hide) an entity."""
        rule = _rule_for(entity)
        return await self.permission_service.allowed_own_or_foreign(
            actor, rule.delete_foreign, rule.delete_own, owner_of(entity)
        )

    async def can_purge(self, comment: Comment, actor: Session | None) -> bool:
        """Check whether an actor may permanently delete a comment.

        Purging is moderation: owning the comment is never enough.
        """
        if not isinstance(comment, Comment):
            raise TypeError(f"Can't purge a {type(comment).__name__}")
        return await self.permission_service.allowed(
            actor, Permission.DELETE_FOREIGN_COMMENT
        )

    async def has_permission(
        self, actor: Session | None, permission: Permission
    ) -> bool:
        """Check a plain, resource-independent permission such as creating."""
        return await self.permission_service.allowed(actor, permission)
