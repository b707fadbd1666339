"""Events raised by the reservation queue."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from library.domain.events.base import DomainEvent, EventType
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId


@dataclass(frozen=True, kw_only=True)
class BookReservedEvent(DomainEvent):
    """Published when a user joins a book's waiting line."""

    event_type: ClassVar[EventType] = EventType.BOOK_RESERVED

    reservation_id: ReservationId
    user_id: UserId
    book_id: BookId


@dataclass(frozen=True, kw_only=True)
class ReservationReadyEvent(DomainEvent):
    """Published when a book is held for the next user in line."""

    event_type: ClassVar[EventType] = EventType.RESERVATION_READY

    reservation_id: ReservationId
    user_id: UserId
    book_id: BookId
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class ReservationExpiredEvent(DomainEvent):
    """Published when a held reservation lapses without being borrowed."""

    event_type: ClassVar[EventType] = EventType.RESERVATION_EXPIRED

    reservation_id: ReservationId
    user_id: UserId
    book_id: BookId
