"""In-memory repositories, used by default and in tests."""

from library.infrastructure.adapters.outbound.persistence.memory.book_repository import (
    InMemoryBookRepository,
)
from library.infrastructure.adapters.outbound.persistence.memory.reservation_repository import (
    InMemoryReservationRepository,
)
from library.infrastructure.adapters.outbound.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryBookRepository",
    "InMemoryReservationRepository",
    "InMemoryUserRepository",
]
