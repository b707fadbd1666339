"""Event bus port interface."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, Union

from library.domain.events.base import DomainEvent, EventType

EventHandler = Callable[[DomainEvent], Union[Awaitable[None], None]]


@dataclass(frozen=True)
class HandlerFailure:
    """
    Record of a subscriber that raised while handling an event.

    Failures are captured by the bus and never propagated to the publisher.
    """

    event: DomainEvent
    handler_name: str
    error: Exception


class EventBusPort(Protocol):
    """
    Publish/subscribe interface decoupling event producers from consumers.

    Handlers are keyed by ``EventType`` and run in subscription order.
    """

    async def publish(self, event: DomainEvent) -> list[HandlerFailure]:
        """
        Deliver an event to every handler subscribed to its type.

        A failing handler never prevents the remaining handlers from running.

        Args:
            event: Event to deliver

        Returns:
            Failures captured during delivery (empty when all handlers succeeded)
        """
        ...

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: Tag to listen for
            handler: Sync or async callable receiving the event
        """
        ...

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Remove a previously registered handler. No-op if absent.

        Args:
            event_type: Tag the handler was registered for
            handler: Handler to remove
        """
        ...
