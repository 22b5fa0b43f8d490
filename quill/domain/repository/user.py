"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.user import User, UserProfile
from quill.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user.

        Raises:
            ValidationError: If the username is already taken
        """
        pass

    @abstractmethod
    async def update_profile(
        self, user_id: UserId, profile: UserProfile
    ) -> Optional[User]:
        """Update a user's profile, returning None if the user doesn't exist."""
        pass

    @abstractmethod
    async def update_password_hash(self, user_id: UserId, password_hash: str) -> bool:
        """Replace a user's stored password hash.

        Returns:
            False if the user doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user account."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users."""
        pass
