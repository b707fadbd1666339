"""Reservation domain entity."""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import ClassVar

from library.domain.clock import utc_now
from library.domain.exceptions import (
    InvalidReservationError,
    InvalidReservationStateTransitionError,
    ReservationExpiredError,
)
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId


class ReservationStatus(str, Enum):
    """Lifecycle states of a reservation."""

    ACTIVE = "active"  # Waiting in queue
    READY = "ready"  # Book held for the user
    FULFILLED = "fulfilled"  # User borrowed the book
    EXPIRED = "expired"  # Hold period lapsed
    CANCELLED = "cancelled"  # User cancelled

    def __str__(self) -> str:
        return self.value


SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class Reservation:
    """
    Reservation aggregate root.

    Represents a user's place in a book's waiting line. Snapshots are
    immutable: every transition returns a new ``Reservation``.

    Lifecycle:
        ACTIVE -> READY -> FULFILLED
                        -> EXPIRED   (hold period elapsed)
        ACTIVE | READY  -> CANCELLED

    Expiration is evaluated lazily against a supplied ``now``; the entity
    never schedules anything itself.
    """

    HOLD_PERIOD: ClassVar[timedelta] = timedelta(days=3)

    id: ReservationId
    user_id: UserId
    book_id: BookId
    status: ReservationStatus
    created_at: datetime
    ready_at: datetime | None = None
    expires_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate reservation invariants."""
        if self.status == ReservationStatus.READY:
            if self.ready_at is None or self.expires_at is None:
                raise InvalidReservationError(
                    "READY reservations must have ready_at and expires_at"
                )

        if self.expires_at is not None and self.expires_at <= self.created_at:
            raise InvalidReservationError(
                "Expiration date must be after creation date"
            )

    @classmethod
    def create(
        cls, user_id: UserId, book_id: BookId, now: datetime | None = None
    ) -> "Reservation":
        """
        Create a new reservation waiting in the queue.

        Args:
            user_id: User placing the reservation
            book_id: Book being reserved
            now: Creation time (defaults to current UTC time)

        Returns:
            New ACTIVE reservation
        """
        return cls(
            id=ReservationId.generate(),
            user_id=user_id,
            book_id=book_id,
            status=ReservationStatus.ACTIVE,
            created_at=now or utc_now(),
        )

    @classmethod
    def restore(
        cls,
        id: ReservationId,
        user_id: UserId,
        book_id: BookId,
        status: ReservationStatus,
        created_at: datetime,
        ready_at: datetime | None = None,
        expires_at: datetime | None = None,
    ) -> "Reservation":
        """Rebuild a reservation from persisted state (invariants still apply)."""
        return cls(
            id=id,
            user_id=user_id,
            book_id=book_id,
            status=ReservationStatus(status),
            created_at=created_at,
            ready_at=ready_at,
            expires_at=expires_at,
        )

    def mark_as_ready(self, now: datetime | None = None) -> "Reservation":
        """
        Hold the book for this reservation and start the hold period.

        Args:
            now: Time the book became available to this user

        Returns:
            READY snapshot expiring ``HOLD_PERIOD`` after ``now``

        Raises:
            InvalidReservationStateTransitionError: If not ACTIVE
        """
        self._require(ReservationStatus.ACTIVE, "mark as ready")

        ready_at = now or utc_now()
        return replace(
            self,
            status=ReservationStatus.READY,
            ready_at=ready_at,
            expires_at=ready_at + self.HOLD_PERIOD,
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """
        Check whether the hold period has lapsed.

        Only READY reservations can be expired; every other status
        reports False regardless of elapsed time.
        """
        if self.status != ReservationStatus.READY or self.expires_at is None:
            return False
        return (now or utc_now()) > self.expires_at

    def remaining_days(self, now: datetime | None = None) -> int:
        """
        Whole days left before the hold lapses (rounded up, never negative).

        Returns:
            0 unless READY
        """
        if self.status != ReservationStatus.READY or self.expires_at is None:
            return 0

        remaining = (self.expires_at - (now or utc_now())).total_seconds()
        return max(0, math.ceil(remaining / SECONDS_PER_DAY))

    def fulfill(self, now: datetime | None = None) -> "Reservation":
        """
        Mark the reservation as fulfilled (the user borrowed the book).

        Raises:
            InvalidReservationStateTransitionError: If not READY
            ReservationExpiredError: If the hold period has lapsed
        """
        self._require(ReservationStatus.READY, "fulfill")

        if self.is_expired(now):
            raise ReservationExpiredError(str(self.id))

        return replace(self, status=ReservationStatus.FULFILLED)

    def expire(self) -> "Reservation":
        """
        Mark the reservation as expired.

        The caller decides that the hold has lapsed (see ``is_expired``);
        this method only enforces the READY precondition.

        Raises:
            InvalidReservationStateTransitionError: If not READY
        """
        self._require(ReservationStatus.READY, "expire")
        return replace(self, status=ReservationStatus.EXPIRED)

    def cancel(self) -> "Reservation":
        """
        Cancel the reservation at the user's request.

        Raises:
            InvalidReservationStateTransitionError: If FULFILLED or EXPIRED
        """
        if self.status in (ReservationStatus.FULFILLED, ReservationStatus.EXPIRED):
            raise InvalidReservationStateTransitionError(
                str(self.id), self.status.value, "cancel"
            )
        return replace(self, status=ReservationStatus.CANCELLED)

    def is_active(self) -> bool:
        """Check if the reservation is waiting in the queue."""
        return self.status == ReservationStatus.ACTIVE

    def is_ready(self, now: datetime | None = None) -> bool:
        """Check if the book is currently held for this user."""
        return self.status == ReservationStatus.READY and not self.is_expired(now)

    def is_pending(self) -> bool:
        """Check if the reservation still holds a place (ACTIVE or READY)."""
        return self.status in (ReservationStatus.ACTIVE, ReservationStatus.READY)

    def _require(self, status: ReservationStatus, operation: str) -> None:
        if self.status != status:
            raise InvalidReservationStateTransitionError(
                str(self.id), self.status.value, operation
            )

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, Reservation):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Reservation(id={self.id}, user_id={self.user_id}, "
            f"book_id={self.book_id}, status={self.status.value})"
        )
