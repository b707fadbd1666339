"""Reservation queue ordering domain service."""

from collections.abc import Iterable

from library.domain.entities.reservation import Reservation
from library.domain.value_objects.user_id import UserId


class ReservationQueuePolicy:
    """
    Domain service for the waiting-line rules of a single book.

    The queue is not a stored structure: it is derived from the ACTIVE
    reservations of a book, ordered strictly by creation time. There are
    no priority tiers; ties keep the order in which reservations were
    supplied (earliest arrival wins).
    """

    @staticmethod
    def order(reservations: Iterable[Reservation]) -> list[Reservation]:
        """
        Order ACTIVE reservations first-in, first-out.

        Args:
            reservations: Reservations for one book, any status

        Returns:
            ACTIVE reservations sorted by ``created_at`` (stable)
        """
        waiting = [r for r in reservations if r.is_active()]
        return sorted(waiting, key=lambda r: r.created_at)

    @staticmethod
    def next_in_line(reservations: Iterable[Reservation]) -> Reservation | None:
        """
        Pick the reservation that should be served next.

        Returns:
            Earliest ACTIVE reservation, or None if nobody is waiting
        """
        queue = ReservationQueuePolicy.order(reservations)
        return queue[0] if queue else None

    @staticmethod
    def position_of(reservations: Iterable[Reservation], user_id: UserId) -> int:
        """
        1-based position of a user's reservation in the queue.

        Returns:
            Position, or 0 if the user is not waiting
        """
        queue = ReservationQueuePolicy.order(reservations)
        for index, reservation in enumerate(queue, start=1):
            if reservation.user_id == user_id:
                return index
        return 0

    @staticmethod
    def has_pending(reservations: Iterable[Reservation]) -> bool:
        """Check if any reservation still holds a place (ACTIVE or READY)."""
        return any(r.is_pending() for r in reservations)
