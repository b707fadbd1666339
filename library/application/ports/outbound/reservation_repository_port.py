"""Reservation repository port interface."""

from typing import Optional, Protocol

from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId


class ReservationRepositoryPort(Protocol):
    """
    Repository interface for the Reservation aggregate.

    ``save`` is an upsert keyed by reservation ID: transitions produce new
    snapshots that replace the stored one. List methods make no ordering
    promise; queue order is decided by ``ReservationQueuePolicy``.
    """

    async def save(self, reservation: Reservation) -> None:
        """
        Insert or replace a reservation snapshot.

        Args:
            reservation: Reservation entity to persist
        """
        ...

    async def get_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """
        Retrieve reservation by ID.

        Args:
            reservation_id: Reservation's unique identifier

        Returns:
            Reservation entity if found, None otherwise
        """
        ...

    async def list_active_by_book(self, book_id: BookId) -> list[Reservation]:
        """
        List ACTIVE reservations for a book (the waiting line).

        Args:
            book_id: Book's unique identifier

        Returns:
            List of ACTIVE reservation entities
        """
        ...

    async def list_by_book(self, book_id: BookId) -> list[Reservation]:
        """
        List all reservations for a book, any status.

        Args:
            book_id: Book's unique identifier

        Returns:
            List of reservation entities
        """
        ...

    async def list_by_status(self, status: ReservationStatus) -> list[Reservation]:
        """
        List reservations in a given status.

        Args:
            status: Status to filter by

        Returns:
            List of reservation entities
        """
        ...

    async def list_by_user_and_book(
        self, user_id: UserId, book_id: BookId
    ) -> list[Reservation]:
        """
        List a user's reservations for one book, any status.

        Args:
            user_id: User's unique identifier
            book_id: Book's unique identifier

        Returns:
            List of reservation entities
        """
        ...

    async def list_by_user(self, user_id: UserId) -> list[Reservation]:
        """
        List all reservations placed by a user.

        Args:
            user_id: User's unique identifier

        Returns:
            List of reservation entities
        """
        ...

    async def list_all(self) -> list[Reservation]:
        """
        List every stored reservation.

        Returns:
            List of reservation entities
        """
        ...

    async def delete(self, reservation_id: ReservationId) -> None:
        """
        Delete a reservation. No-op if it does not exist.

        Args:
            reservation_id: Reservation's unique identifier
        """
        ...
