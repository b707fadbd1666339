"""Event bus adapters."""

from library.infrastructure.adapters.outbound.events.in_memory_event_bus import (
    InMemoryEventBus,
)

__all__ = ["InMemoryEventBus"]
