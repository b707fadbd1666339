"""
In-process implementation of EventBusPort.

Handlers run sequentially in the publisher's task, in the order they were
subscribed. A failing handler is logged and recorded but never stops the
remaining handlers or reaches the publisher.
"""

import inspect
import logging
from collections import defaultdict

from library.application.ports.outbound.event_bus_port import (
    EventBusPort,
    EventHandler,
    HandlerFailure,
)
from library.domain.events.base import DomainEvent, EventType

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBusPort):
    """
    Publish/subscribe registry keyed by event type.

    Usage:
        bus = InMemoryEventBus()
        bus.subscribe(EventType.BOOK_AVAILABLE, handler.handle)
        failures = await bus.publish(BookAvailableEvent(book_id=book_id))
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[EventType, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {_handler_name(handler)} to {event_type}")

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if not handlers:
            return

        try:
            handlers.remove(handler)
        except ValueError:
            return

        if not handlers:
            del self._handlers[event_type]
        logger.debug(f"Unsubscribed {_handler_name(handler)} from {event_type}")

    async def publish(self, event: DomainEvent) -> list[HandlerFailure]:
        """
        Deliver an event to its subscribers.

        Handlers subscribed or removed during delivery take effect from the
        next publish.

        Args:
            event: Event to deliver

        Returns:
            One ``HandlerFailure`` per handler that raised
        """
        handlers = list(self._handlers.get(event.event_type, ()))
        logger.debug(
            f"Publishing {event.event_type} event {event.event_id} "
            f"to {len(handlers)} handler(s)"
        )

        failures: list[HandlerFailure] = []
        for handler in handlers:
            name = _handler_name(handler)
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(
                    f"Handler {name} failed for {event.event_type} event {event.event_id}"
                )
                failures.append(HandlerFailure(event=event, handler_name=name, error=e))

        return failures

    def subscriber_count(self, event_type: EventType) -> int:
        """Number of handlers registered for an event type."""
        return len(self._handlers.get(event_type, ()))

    def clear(self) -> None:
        """Remove every subscription."""
        self._handlers.clear()


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
