"""User domain service."""

import logfire

from quill.domain.error import BusinessRuleViolationError, NotFoundError
from quill.domain.model import User, UserProfile
from quill.domain.repository import (
    ArticleRepository,
    GroupRepository,
    SessionRepository,
    UserRepository,
)
from quill.domain.value import UserId
from quill.util.security import hash_password, verify_password

from .base import Service
from .comment_service import CommentService


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self,
        user_repository: UserRepository,
        group_repository: GroupRepository,
        article_repository: ArticleRepository,
        session_repository: SessionRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            group_repository: Group repository (to validate group membership)
            article_repository: Article repository (to guard account deletion)
            session_repository: Session repository (to log out deleted users)
            comment_service: Comment service (to anonymize deleted authors)
        """
        self.user_repository = user_repository
        self.group_repository = group_repository
        self.article_repository = article_repository
        self.session_repository = session_repository
        self.comment_service = comment_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def count(self) -> int:
        """Count registered users."""
        return await self.user_repository.count()

    async def create_user(self, user: User, password: str) -> User:
        """Register a new account with a password.

        Raises:
            BusinessRuleViolationError: If the user's group doesn't exist
        """
        with logfire.span(
            "user_service.create_user", user_id=user.id, group=user.group
        ):
            if await self.group_repository.find_by_id(user.group) is None:
                logfire.error("Unknown group for new user", group=user.group)
                raise BusinessRuleViolationError(f"Group {user.group} does not exist")
            created = await self.user_repository.insert(
                user.model_copy(update={"password_hash": hash_password(password)})
            )
            logfire.info("User created", user_id=created.id, group=created.group)
            return created

    async def authenticate(self, user_id: UserId, password: str) -> User | None:
        """Check a username and password.

        A hash made with outdated parameters is replaced on success.

        Returns:
            The user if the credentials match, None otherwise
        """
        with logfire.span("user_service.authenticate", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Login for unknown user", user_id=user_id)
                return None

            valid, new_hash = verify_password(password, user.password_hash)
            if not valid:
                logfire.warn("Wrong password", user_id=user_id)
                return None

            if new_hash is not None:
                await self.user_repository.update_password_hash(user_id, new_hash)
                logfire.info("Password rehashed", user_id=user_id)
            return user

    async def set_password(self, user_id: UserId, password: str) -> None:
        """Replace a user's password.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.set_password", user_id=user_id):
            if not await self.user_repository.update_password_hash(
                user_id, hash_password(password)
            ):
                logfire.warn("User not found for password change", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("Password changed", user_id=user_id)

    async def edit_profile(self, user_id: UserId, profile: UserProfile) -> User:
        """Update a user's display name and email.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.edit_profile", user_id=user_id):
            updated = await self.user_repository.update_profile(user_id, profile)
            if updated is None:
                logfire.warn("User not found for profile edit", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User profile updated", user_id=user_id)
            return updated

    async def delete_account(self, user_id: UserId, purge_content: bool) -> None:
        """Delete an account.

        The user's comments stay in their threads but lose their author.
        With ``purge_content`` their content is removed as well.

        Args:
            user_id: User ID
            purge_content: Whether to also blank and hide the user's comments

        Raises:
            NotFoundError: If user not found
            BusinessRuleViolationError: If the user still authors articles
        """
        with logfire.span(
            "user_service.delete_account",
            user_id=user_id,
            purge_content=purge_content,
        ):
            await self.get_by_id(user_id)

            articles = await self.article_repository.count_by_author(user_id)
            if articles > 0:
                logfire.warn(
                    "Refusing to delete user with articles",
                    user_id=user_id,
                    articles=articles,
                )
                raise BusinessRuleViolationError(
                    f"User {user_id} still authors {articles} article(s)"
                )

            await self.comment_service.anonymize_author(user_id, purge_content)
            await self.session_repository.delete_by_user(user_id)
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=user_id)
