"""Events raised by the book aggregate."""

from dataclasses import dataclass
from typing import ClassVar

from library.domain.events.base import DomainEvent, EventType
from library.domain.value_objects.book_id import BookId


@dataclass(frozen=True, kw_only=True)
class BookAvailableEvent(DomainEvent):
    """Published when a borrowed book is returned to the shelf."""

    event_type: ClassVar[EventType] = EventType.BOOK_AVAILABLE

    book_id: BookId
