"""Handler advancing the reservation queue when a book comes back."""

import logging

from library.application.ports.outbound.event_bus_port import EventBusPort
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.events.base import DomainEvent, EventType
from library.domain.events.book_events import BookAvailableEvent

logger = logging.getLogger(__name__)


class BookAvailableHandler:
    """
    Notifies the next user in line when a book becomes available.

    Usage:
        handler = BookAvailableHandler(queue_service)
        handler.subscribe(event_bus)
    """

    def __init__(self, queue_service: ReservationQueueService):
        self.queue_service = queue_service

    def subscribe(self, event_bus: EventBusPort) -> None:
        """Register this handler for ``BookAvailable`` events."""
        event_bus.subscribe(EventType.BOOK_AVAILABLE, self.handle)

    def unsubscribe(self, event_bus: EventBusPort) -> None:
        """Remove this handler from the bus."""
        event_bus.unsubscribe(EventType.BOOK_AVAILABLE, self.handle)

    async def handle(self, event: DomainEvent) -> None:
        """
        Hold the returned book for the head of its queue.

        Args:
            event: ``BookAvailableEvent`` for the returned book
        """
        if not isinstance(event, BookAvailableEvent):
            logger.warning(f"Ignoring unexpected event {event.event_type} ({event.event_id})")
            return

        logger.info(f"Book {event.book_id} is available (event {event.event_id})")
        await self.queue_service.notify_next_in_queue(event.book_id)
