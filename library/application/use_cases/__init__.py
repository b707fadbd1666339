"""Use cases (application layer business logic)."""

# Reservation use cases
from library.application.use_cases.reservations import (
    CancelReservationUseCase,
    GetBookQueueUseCase,
    ListUserReservationsUseCase,
    ReserveBookUseCase,
)

# Book circulation use cases
from library.application.use_cases.books import (
    BorrowBookUseCase,
    ReturnBookUseCase,
)

__all__ = [
    # Reservations
    "CancelReservationUseCase",
    "GetBookQueueUseCase",
    "ListUserReservationsUseCase",
    "ReserveBookUseCase",
    # Books
    "BorrowBookUseCase",
    "ReturnBookUseCase",
]
