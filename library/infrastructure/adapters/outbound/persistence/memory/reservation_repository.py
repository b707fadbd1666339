"""In-memory implementation of ReservationRepositoryPort."""

from typing import Callable, Optional

from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId


class InMemoryReservationRepository(ReservationRepositoryPort):
    """
    Dict-backed reservation store.

    Keys are raw reservation IDs. Replacing a snapshot keeps its original
    insertion slot, so listings come back in creation order.
    """

    def __init__(self) -> None:
        self._reservations: dict[str, Reservation] = {}

    async def save(self, reservation: Reservation) -> None:
        self._reservations[str(reservation.id)] = reservation

    async def get_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        return self._reservations.get(str(reservation_id))

    async def list_active_by_book(self, book_id: BookId) -> list[Reservation]:
        return self._filter(
            lambda r: r.book_id == book_id and r.status == ReservationStatus.ACTIVE
        )

    async def list_by_book(self, book_id: BookId) -> list[Reservation]:
        return self._filter(lambda r: r.book_id == book_id)

    async def list_by_status(self, status: ReservationStatus) -> list[Reservation]:
        return self._filter(lambda r: r.status == status)

    async def list_by_user_and_book(
        self, user_id: UserId, book_id: BookId
    ) -> list[Reservation]:
        return self._filter(lambda r: r.user_id == user_id and r.book_id == book_id)

    async def list_by_user(self, user_id: UserId) -> list[Reservation]:
        return self._filter(lambda r: r.user_id == user_id)

    async def list_all(self) -> list[Reservation]:
        return list(self._reservations.values())

    async def delete(self, reservation_id: ReservationId) -> None:
        self._reservations.pop(str(reservation_id), None)

    def clear(self) -> None:
        self._reservations.clear()

    def _filter(self, predicate: Callable[[Reservation], bool]) -> list[Reservation]:
        return [r for r in self._reservations.values() if predicate(r)]
