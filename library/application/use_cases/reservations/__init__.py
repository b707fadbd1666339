"""Reservation use cases."""

from library.application.use_cases.reservations.cancel_reservation import (
    CancelReservationUseCase,
)
from library.application.use_cases.reservations.get_book_queue import GetBookQueueUseCase
from library.application.use_cases.reservations.list_user_reservations import (
    ListUserReservationsUseCase,
)
from library.application.use_cases.reservations.reserve_book import ReserveBookUseCase

__all__ = [
    "CancelReservationUseCase",
    "GetBookQueueUseCase",
    "ListUserReservationsUseCase",
    "ReserveBookUseCase",
]
