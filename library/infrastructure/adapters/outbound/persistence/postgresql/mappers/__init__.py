"""Mappers between domain entities and SQLAlchemy models."""

from library.infrastructure.adapters.outbound.persistence.postgresql.mappers.reservation_mapper import (
    ReservationMapper,
)

__all__ = ["ReservationMapper"]
