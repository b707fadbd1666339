"""
Mapper between Reservation domain entity and ReservationModel database model.

This mapper handles bidirectional conversion:
- to_entity(): Convert SQLAlchemy model → Domain entity
- to_model(): Convert Domain entity → SQLAlchemy model
"""

from typing import Optional

from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId
from library.infrastructure.adapters.outbound.persistence.postgresql.models.reservation_model import (
    ReservationModel,
)


class ReservationMapper:
    """
    Mapper between Reservation entity and ReservationModel.

    Identifiers travel as raw strings in the database and are rebuilt as
    value objects (re-validated) on the way back.
    """

    @staticmethod
    def to_entity(model: ReservationModel) -> Reservation:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: ReservationModel from database

        Returns:
            Reservation domain entity
        """
        return Reservation.restore(
            id=ReservationId(model.id),
            user_id=UserId(model.user_id),
            book_id=BookId(model.book_id),
            status=ReservationStatus(model.status),
            created_at=model.created_at,
            ready_at=model.ready_at,
            expires_at=model.expires_at,
        )

    @staticmethod
    def to_model(
        entity: Reservation, existing_model: Optional[ReservationModel] = None
    ) -> ReservationModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: Reservation domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            ReservationModel for database persistence
        """
        if existing_model:
            # Identity and creation time never change
            existing_model.status = entity.status.value
            existing_model.ready_at = entity.ready_at
            existing_model.expires_at = entity.expires_at
            return existing_model

        return ReservationModel(
            id=str(entity.id),
            user_id=str(entity.user_id),
            book_id=str(entity.book_id),
            status=entity.status.value,
            created_at=entity.created_at,
            ready_at=entity.ready_at,
            expires_at=entity.expires_at,
        )
