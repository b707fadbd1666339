"""Outbound ports (driven adapters interfaces)."""

from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.ports.outbound.event_bus_port import (
    EventBusPort,
    EventHandler,
    HandlerFailure,
)
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.application.ports.outbound.user_repository_port import UserRepositoryPort

__all__ = [
    "BookRepositoryPort",
    "EventBusPort",
    "EventHandler",
    "HandlerFailure",
    "ReservationRepositoryPort",
    "UserRepositoryPort",
]
