"""Domain event base types."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar
from uuid import uuid4

from library.domain.clock import utc_now


class EventType(str, Enum):
    """Discriminator tags used to route events to subscribers."""

    BOOK_RESERVED = "BookReserved"
    BOOK_AVAILABLE = "BookAvailable"
    RESERVATION_READY = "ReservationReady"
    RESERVATION_EXPIRED = "ReservationExpired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for domain events.

    Events are immutable records created at the moment a state transition
    happens. Subclasses set ``event_type`` and add their payload fields.

    Example::

        @dataclass(frozen=True, kw_only=True)
        class BookAvailableEvent(DomainEvent):
            event_type: ClassVar[EventType] = EventType.BOOK_AVAILABLE
            book_id: BookId
    """

    event_type: ClassVar[EventType]

    event_id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the event into primitive values for logs and transports."""
        payload: dict[str, Any] = {"event_type": self.event_type.value}
        for name, value in vars(self).items():
            if isinstance(value, datetime):
                payload[name] = value.isoformat()
            else:
                payload[name] = str(value)
        return payload
