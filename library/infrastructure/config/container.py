"""
Composition root.

Wires repositories, the event bus, the reservation queue service and the
use cases together according to the settings. Nothing in the application
is a global singleton: every collaborator is owned by a ``Container``.
"""

import logging
from typing import Optional

from library.application.handlers.book_available_handler import BookAvailableHandler
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.application.use_cases.books import (
    BorrowBookUseCase,
    PayFeesUseCase,
    ReturnBookUseCase,
)
from library.application.use_cases.reservations import (
    CancelReservationUseCase,
    GetBookQueueUseCase,
    ListUserReservationsUseCase,
    ReserveBookUseCase,
)
from library.domain.clock import Clock, utc_now
from library.infrastructure.adapters.outbound.events.in_memory_event_bus import (
    InMemoryEventBus,
)
from library.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryBookRepository,
    InMemoryReservationRepository,
    InMemoryUserRepository,
)
from library.infrastructure.adapters.outbound.persistence.postgresql.repositories import (
    PostgresReservationRepository,
)
from library.infrastructure.config.database import DatabaseConfig
from library.infrastructure.config.settings import Settings
from library.infrastructure.scheduling.expiration_sweeper import ExpirationSweeper

logger = logging.getLogger(__name__)


class Container:
    """
    Holds every long-lived collaborator of the application.

    Users and books always live in memory (their management is outside
    this service); reservations go to memory or PostgreSQL depending on
    ``settings.reservation_store``.

    Usage:
        container = Container(settings)
        await container.startup()
        output = await container.reserve_book().execute(input_dto)
        await container.shutdown()
    """

    def __init__(self, settings: Settings, clock: Clock = utc_now):
        """
        Build the object graph.

        Args:
            settings: Application settings
            clock: Source of the current time, shared by every component
        """
        self.settings = settings
        self.clock = clock

        self.database: Optional[DatabaseConfig] = None
        self.reservations: ReservationRepositoryPort
        if settings.reservation_store == "postgresql":
            self.database = DatabaseConfig(
                settings.database_url_str,
                echo=settings.db_echo,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
            )
            self.reservations = PostgresReservationRepository(self.database.session_factory)
        else:
            self.reservations = InMemoryReservationRepository()

        self.users = InMemoryUserRepository()
        self.books = InMemoryBookRepository()
        self.event_bus = InMemoryEventBus()

        self.queue_service = ReservationQueueService(
            self.reservations, self.event_bus, clock=clock, books=self.books
        )
        self.book_available_handler = BookAvailableHandler(self.queue_service)
        self.book_available_handler.subscribe(self.event_bus)

        self.sweeper = ExpirationSweeper(
            self.queue_service, settings.expiration_sweep_interval_seconds
        )

    async def startup(self) -> None:
        """Prepare storage and start background work."""
        if self.database is not None:
            await self.database.create_tables()
            logger.info("Reservation tables ready")

        if self.settings.expiration_sweep_enabled:
            self.sweeper.start()

    async def shutdown(self) -> None:
        """Stop background work and release connections."""
        await self.sweeper.stop()
        if self.database is not None:
            await self.database.close()

    # Use case factories

    def reserve_book(self) -> ReserveBookUseCase:
        return ReserveBookUseCase(
            self.users, self.books, self.reservations, self.queue_service, clock=self.clock
        )

    def cancel_reservation(self) -> CancelReservationUseCase:
        return CancelReservationUseCase(self.reservations, self.queue_service, clock=self.clock)

    def list_user_reservations(self) -> ListUserReservationsUseCase:
        return ListUserReservationsUseCase(
            self.users, self.reservations, self.queue_service, clock=self.clock
        )

    def get_book_queue(self) -> GetBookQueueUseCase:
        return GetBookQueueUseCase(self.books, self.queue_service, clock=self.clock)

    def borrow_book(self) -> BorrowBookUseCase:
        return BorrowBookUseCase(self.users, self.books, self.queue_service, clock=self.clock)

    def return_book(self) -> ReturnBookUseCase:
        return ReturnBookUseCase(self.users, self.books, self.event_bus, clock=self.clock)

    def pay_fees(self) -> PayFeesUseCase:
        return PayFeesUseCase(self.users)
