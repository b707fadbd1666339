"""In-memory implementation of UserRepositoryPort."""

from typing import Optional

from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.domain.entities.user import User
from library.domain.value_objects.user_id import UserId


class InMemoryUserRepository(UserRepositoryPort):
    """Dict-backed user store keyed by the raw user ID."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def save(self, user: User) -> None:
        self._users[str(user.id)] = user

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(str(user_id))

    def clear(self) -> None:
        self._users.clear()
