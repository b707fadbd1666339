"""PostgreSQL repository implementations."""

from library.infrastructure.adapters.outbound.persistence.postgresql.repositories.reservation_repository import (
    PostgresReservationRepository,
)

__all__ = ["PostgresReservationRepository"]
