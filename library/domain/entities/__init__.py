"""Domain entities package."""

from library.domain.entities.book import Book, BookStatus
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.entities.user import User, UserStatus

__all__ = [
    "Book",
    "BookStatus",
    "Reservation",
    "ReservationStatus",
    "User",
    "UserStatus",
]
