"""Domain events package."""

from library.domain.events.base import DomainEvent, EventType
from library.domain.events.book_events import BookAvailableEvent
from library.domain.events.reservation_events import (
    BookReservedEvent,
    ReservationExpiredEvent,
    ReservationReadyEvent,
)

__all__ = [
    "BookAvailableEvent",
    "BookReservedEvent",
    "DomainEvent",
    "EventType",
    "ReservationExpiredEvent",
    "ReservationReadyEvent",
]
