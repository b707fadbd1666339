"""Domain exceptions package."""

from library.domain.exceptions.base import DomainException
from library.domain.exceptions.user_exceptions import (
    InvalidFeePaymentError,
    InvalidUserError,
    InvalidUserIdError,
    InvalidUserStateTransitionError,
    UserDomainException,
    UserNotFoundError,
)
from library.domain.exceptions.book_exceptions import (
    BookDomainException,
    BookNotFoundError,
    InvalidBookError,
    InvalidBookIdError,
    InvalidBookStateError,
)
from library.domain.exceptions.reservation_exceptions import (
    InvalidReservationError,
    InvalidReservationIdError,
    InvalidReservationStateTransitionError,
    ReservationAlreadyExistsError,
    ReservationDomainException,
    ReservationExpiredError,
    ReservationNotFoundError,
)

__all__ = [
    # Base
    "DomainException",
    # User exceptions
    "InvalidFeePaymentError",
    "UserDomainException",
    "InvalidUserError",
    "InvalidUserIdError",
    "InvalidUserStateTransitionError",
    "UserNotFoundError",
    # Book exceptions
    "BookDomainException",
    "BookNotFoundError",
    "InvalidBookError",
    "InvalidBookIdError",
    "InvalidBookStateError",
    # Reservation exceptions
    "ReservationDomainException",
    "InvalidReservationError",
    "InvalidReservationIdError",
    "InvalidReservationStateTransitionError",
    "ReservationAlreadyExistsError",
    "ReservationExpiredError",
    "ReservationNotFoundError",
]
