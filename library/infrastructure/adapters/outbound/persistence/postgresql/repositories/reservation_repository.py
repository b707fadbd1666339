"""
PostgreSQL implementation of ReservationRepositoryPort.

The queue service is long-lived, so this repository does not hold a
session: every operation runs in its own short session and commits
before returning.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId
from library.infrastructure.adapters.outbound.persistence.postgresql.mappers.reservation_mapper import (
    ReservationMapper,
)
from library.infrastructure.adapters.outbound.persistence.postgresql.models.reservation_model import (
    ReservationModel,
)


class PostgresReservationRepository(ReservationRepositoryPort):
    """
    PostgreSQL implementation of ReservationRepositoryPort.

    Listings are ordered by ``created_at`` then ``id`` so that ties keep a
    deterministic order.

    Usage:
        repo = PostgresReservationRepository(db_config.session_factory)
        await repo.save(reservation)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize PostgreSQL reservation repository.

        Args:
            session_factory: Factory producing SQLAlchemy async sessions
        """
        self.session_factory = session_factory
        self.mapper = ReservationMapper

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    async def save(self, reservation: Reservation) -> None:
        """
        Insert or replace a reservation snapshot.

        Args:
            reservation: Reservation entity to persist
        """
        async with self._session() as session:
            existing = await session.get(ReservationModel, str(reservation.id))
            if existing is None:
                session.add(self.mapper.to_model(reservation))
            else:
                self.mapper.to_model(reservation, existing_model=existing)
            await session.commit()

    async def get_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        async with self._session() as session:
            model = await session.get(ReservationModel, str(reservation_id))
            if model is None:
                return None
            return self.mapper.to_entity(model)

    async def list_active_by_book(self, book_id: BookId) -> list[Reservation]:
        return await self._list(
            select(ReservationModel).where(
                ReservationModel.book_id == str(book_id),
                ReservationModel.status == ReservationStatus.ACTIVE.value,
            )
        )

    async def list_by_book(self, book_id: BookId) -> list[Reservation]:
        return await self._list(
            select(ReservationModel).where(ReservationModel.book_id == str(book_id))
        )

    async def list_by_status(self, status: ReservationStatus) -> list[Reservation]:
        return await self._list(
            select(ReservationModel).where(ReservationModel.status == status.value)
        )

    async def list_by_user_and_book(
        self, user_id: UserId, book_id: BookId
    ) -> list[Reservation]:
        return await self._list(
            select(ReservationModel).where(
                ReservationModel.user_id == str(user_id),
                ReservationModel.book_id == str(book_id),
            )
        )

    async def list_by_user(self, user_id: UserId) -> list[Reservation]:
        return await self._list(
            select(ReservationModel).where(ReservationModel.user_id == str(user_id))
        )

    async def list_all(self) -> list[Reservation]:
        return await self._list(select(ReservationModel))

    async def delete(self, reservation_id: ReservationId) -> None:
        """
        Hard delete a reservation. No-op if it does not exist.

        Args:
            reservation_id: Reservation's unique identifier
        """
        async with self._session() as session:
            await session.execute(
                delete(ReservationModel).where(ReservationModel.id == str(reservation_id))
            )
            await session.commit()

    async def _list(self, stmt: Select) -> list[Reservation]:
        stmt = stmt.order_by(ReservationModel.created_at, ReservationModel.id)
        async with self._session() as session:
            result = await session.execute(stmt)
            return [self.mapper.to_entity(model) for model in result.scalars().all()]
