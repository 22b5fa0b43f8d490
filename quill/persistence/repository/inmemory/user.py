"""In-memory user repository for testing."""

from typing import Optional

from quill.domain.error import ValidationError
from quill.domain.model.user import User, UserProfile
from quill.domain.repository.user import UserRepository
from quill.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def insert(self, user: User) -> User:
        """Insert a user."""
        if user.id in self._users:
            raise ValidationError(f"Username already taken: {user.id}")
        self._users[user.id] = user
        return user

    async def update_profile(
        self, user_id: UserId, profile: UserProfile
    ) -> Optional[User]:
        """Update a user's profile."""
        user = self._users.get(user_id)
        if user is None:
            return None
        self._users[user_id] = user.model_copy(
            update={"name": profile.name, "email": profile.email}
        )
        return self._users[user_id]

    async def update_password_hash(self, user_id: UserId, password_hash: str) -> bool:
        """Replace a user's stored password hash."""
        user = self._users.get(user_id)
        if user is None:
            return False
        self._users[user_id] = user.model_copy(update={"password_hash": password_hash})
        return True

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)

    async def count(self) -> int:
        """Count users."""
        return len(self._users)
