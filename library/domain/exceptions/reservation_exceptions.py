"""Reservation domain exceptions."""

from library.domain.exceptions.base import DomainException


class ReservationDomainException(DomainException):
    """Base exception for reservation-related domain errors."""


class InvalidReservationIdError(ReservationDomainException):
    """Raised when a reservation identifier is malformed."""

    def __init__(self, value: str):
        super().__init__(
            message=(
                f"Invalid reservation ID '{value}': "
                "must be RES followed by 10 digits (e.g., RES0001234567)"
            ),
            code="INVALID_RESERVATION_ID"
        )


class InvalidReservationError(ReservationDomainException):
    """Raised when a reservation snapshot violates its invariants."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid reservation: {reason}",
            code="INVALID_RESERVATION"
        )


class InvalidReservationStateTransitionError(ReservationDomainException):
    """Raised when a reservation operation is not allowed from its current status."""

    def __init__(self, reservation_id: str, current_status: str, operation: str):
        self.reservation_id = reservation_id
        self.current_status = current_status
        self.operation = operation
        super().__init__(
            message=(
                f"Cannot {operation} reservation {reservation_id} "
                f"in status: {current_status}"
            ),
            code="INVALID_STATE_TRANSITION"
        )


class ReservationExpiredError(ReservationDomainException):
    """Raised when attempting to use a reservation whose hold period has lapsed."""

    def __init__(self, reservation_id: str):
        super().__init__(
            message=f"Reservation has expired: {reservation_id}",
            code="RESERVATION_EXPIRED"
        )


class ReservationAlreadyExistsError(ReservationDomainException):
    """Raised when a user already holds a pending reservation for a book."""

    def __init__(self, user_id: str, book_id: str):
        self.user_id = user_id
        self.book_id = book_id
        super().__init__(
            message=f"User {user_id} already has an active reservation for book {book_id}",
            code="ALREADY_RESERVED"
        )


class ReservationNotFoundError(ReservationDomainException):
    """Raised when a reservation cannot be found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Reservation not found: {identifier}",
            code="RESERVATION_NOT_FOUND"
        )
