"""Application services."""

from library.application.services.reservation_queue_service import (
    ReservationQueueService,
    ReservationResult,
)

__all__ = ["ReservationQueueService", "ReservationResult"]
