"""
SQLAlchemy models for PostgreSQL persistence.

These are pure SQLAlchemy models with NO business logic.
Business logic lives in the Domain layer (library.domain.entities).

Models:
- Base: Declarative base with constraint naming convention
- ReservationModel: Reservation queue entries
"""

from library.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base
from library.infrastructure.adapters.outbound.persistence.postgresql.models.reservation_model import (
    ReservationModel,
)

__all__ = [
    "Base",
    "ReservationModel",
]
