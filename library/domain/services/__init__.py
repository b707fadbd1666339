"""Domain services package."""

from library.domain.services.overdue_fee_policy import OverdueFeePolicy
from library.domain.services.reservation_queue_policy import ReservationQueuePolicy

__all__ = [
    "OverdueFeePolicy",
    "ReservationQueuePolicy",
]
