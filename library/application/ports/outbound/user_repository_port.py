"""User repository port interface."""

from typing import Optional, Protocol

from library.domain.entities.user import User
from library.domain.value_objects.user_id import UserId


class UserRepositoryPort(Protocol):
    """Repository interface for User entity."""

    async def save(self, user: User) -> None:
        """
        Insert or replace a user snapshot.

        Args:
            user: User entity to persist
        """
        ...

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """
        Retrieve user by ID.

        Args:
            user_id: User's unique identifier

        Returns:
            User entity if found, None otherwise
        """
        ...
