"""Reservation DTOs (Data Transfer Objects)."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from library.domain.clock import utc_now
from library.domain.entities.reservation import Reservation, ReservationStatus


class ReservationFailureReason(str, Enum):
    """Machine-readable reasons a reservation request was refused."""

    USER_NOT_FOUND = "user_not_found"
    USER_INACTIVE = "user_inactive"
    BOOK_NOT_FOUND = "book_not_found"
    BOOK_AVAILABLE = "book_available"
    ALREADY_RESERVED = "already_reserved"
    RESERVATION_NOT_FOUND = "reservation_not_found"
    NOT_CANCELLABLE = "not_cancellable"
    ALREADY_CANCELLED = "already_cancelled"


class ReserveBookInput(BaseModel):
    """Input DTO for joining a book's waiting line."""

    user_id: str = Field(..., min_length=1, description="User's 8-digit identifier")
    book_id: str = Field(..., min_length=1, description="Book's 10-character identifier")

    model_config = {"frozen": True}


class CancelReservationInput(BaseModel):
    """Input DTO for cancelling a reservation."""

    reservation_id: str = Field(..., min_length=1, description="Reservation identifier")

    model_config = {"frozen": True}


class ReservationOutput(BaseModel):
    """Output DTO for reservation information."""

    id: str = Field(..., description="Reservation's unique identifier")
    user_id: str = Field(..., description="User holding the reservation")
    book_id: str = Field(..., description="Reserved book")
    status: ReservationStatus = Field(..., description="Lifecycle status")
    created_at: datetime = Field(..., description="Time the user joined the queue")
    ready_at: Optional[datetime] = Field(None, description="Time the book was held")
    expires_at: Optional[datetime] = Field(None, description="End of the hold period")
    remaining_days: int = Field(0, description="Whole days left to pick the book up")
    queue_position: Optional[int] = Field(
        None, description="1-based position while waiting in the queue"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_entity(
        cls,
        reservation: Reservation,
        now: Optional[datetime] = None,
        queue_position: Optional[int] = None,
    ) -> "ReservationOutput":
        """
        Create DTO from Reservation entity.

        Args:
            reservation: Reservation domain entity
            now: Reference time for ``remaining_days``
            queue_position: Position in the book's queue, if known

        Returns:
            ReservationOutput DTO
        """
        return cls(
            id=str(reservation.id),
            user_id=str(reservation.user_id),
            book_id=str(reservation.book_id),
            status=reservation.status,
            created_at=reservation.created_at,
            ready_at=reservation.ready_at,
            expires_at=reservation.expires_at,
            remaining_days=reservation.remaining_days(now or utc_now()),
            queue_position=queue_position,
        )


class ReserveBookOutput(BaseModel):
    """
    Output DTO for a reservation attempt.

    Business refusals are reported here (``success=False`` with a
    ``reason``) rather than raised.
    """

    success: bool = Field(..., description="Whether the reservation was placed")
    message: str = Field(..., description="Human-readable outcome")
    reason: Optional[ReservationFailureReason] = Field(
        None, description="Why the request was refused"
    )
    reservation: Optional[ReservationOutput] = Field(
        None, description="The new reservation, on success"
    )

    model_config = {"frozen": True}

    @classmethod
    def failure(cls, reason: ReservationFailureReason, message: str) -> "ReserveBookOutput":
        return cls(success=False, message=message, reason=reason)


class CancelReservationOutput(BaseModel):
    """Output DTO for a cancellation attempt."""

    success: bool = Field(..., description="Whether the reservation was cancelled")
    message: str = Field(..., description="Human-readable outcome")
    reason: Optional[ReservationFailureReason] = Field(
        None, description="Why the request was refused"
    )
    reservation: Optional[ReservationOutput] = Field(
        None, description="The cancelled reservation, on success"
    )

    model_config = {"frozen": True}

    @classmethod
    def failure(
        cls, reason: ReservationFailureReason, message: str
    ) -> "CancelReservationOutput":
        return cls(success=False, message=message, reason=reason)


class UserReservationsOutput(BaseModel):
    """Output DTO listing a user's reservations."""

    user_id: str = Field(..., description="User's identifier")
    reservations: list[ReservationOutput] = Field(..., description="Reservations, newest first")
    total: int = Field(..., description="Number of reservations")

    model_config = {"frozen": True}


class BookQueueOutput(BaseModel):
    """Output DTO for a book's waiting line."""

    book_id: str = Field(..., description="Book's identifier")
    queue: list[ReservationOutput] = Field(..., description="ACTIVE reservations, FIFO")
    length: int = Field(..., description="Number of users waiting")

    model_config = {"frozen": True}
