"""Data Transfer Objects (DTOs) for application layer."""

from library.application.dto.book_dto import (
    BookCirculationOutput,
    BookOutput,
    BorrowBookInput,
    BorrowerOutput,
    ReturnBookInput,
)
from library.application.dto.reservation_dto import (
    BookQueueOutput,
    CancelReservationInput,
    CancelReservationOutput,
    ReservationFailureReason,
    ReservationOutput,
    ReserveBookInput,
    ReserveBookOutput,
    UserReservationsOutput,
)

__all__ = [
    # Book DTOs
    "BookCirculationOutput",
    "BookOutput",
    "BorrowBookInput",
    "BorrowerOutput",
    "ReturnBookInput",
    # Reservation DTOs
    "BookQueueOutput",
    "CancelReservationInput",
    "CancelReservationOutput",
    "ReservationFailureReason",
    "ReservationOutput",
    "ReserveBookInput",
    "ReserveBookOutput",
    "UserReservationsOutput",
]
