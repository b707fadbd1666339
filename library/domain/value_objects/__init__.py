"""Domain value objects package."""

from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId

__all__ = [
    "BookId",
    "ReservationId",
    "UserId",
]
