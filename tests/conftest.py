"""
Pytest configuration and fixtures for the library reservation tests.

This module provides:
- A controllable clock
- In-memory repositories and event bus
- A wired reservation queue service
- Sample users and books
- An application container and HTTP client
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.entities.book import Book, BookStatus
from library.domain.entities.user import User
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId
from library.infrastructure.adapters.outbound.events.in_memory_event_bus import (
    InMemoryEventBus,
)
from library.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryBookRepository,
    InMemoryReservationRepository,
    InMemoryUserRepository,
)
from library.infrastructure.config.container import Container
from library.infrastructure.config.settings import Settings
from library.main import create_app

START = datetime(2024, 1, 15, 10, 0, tzinfo=UTC)


class FakeClock:
    """Clock returning a fixed instant that tests move forward explicitly."""

    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


# ============================================================================
# Time
# ============================================================================
@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at 2024-01-15 10:00 UTC."""
    return FakeClock()


# ============================================================================
# Adapters
# ============================================================================
@pytest.fixture
def reservation_repo() -> InMemoryReservationRepository:
    return InMemoryReservationRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def book_repo() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def queue_service(reservation_repo, event_bus, clock) -> ReservationQueueService:
    """Queue service over in-memory storage, driven by the fake clock."""
    return ReservationQueueService(reservation_repo, event_bus, clock=clock)


# ============================================================================
# Sample data
# ============================================================================
@pytest.fixture
def alice() -> User:
    return User(id=UserId("10000001"), name="Alice")


@pytest.fixture
def bob() -> User:
    return User(id=UserId("10000002"), name="Bob")


@pytest.fixture
def carol() -> User:
    return User(id=UserId("10000003"), name="Carol")


@pytest.fixture
def book_id() -> BookId:
    return BookId("BOOK000001")


@pytest.fixture
def borrowed_book(book_id) -> Book:
    """A book currently on loan to a user outside the sample set."""
    return Book(
        id=book_id,
        title="Domain-Driven Design",
        author="Eric Evans",
        status=BookStatus.BORROWED,
        borrowed_by=UserId("99999999"),
        borrowed_at=START - timedelta(days=7),
    )


# ============================================================================
# Application
# ============================================================================
@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(
        _env_file=None,
        environment="development",
        reservation_store="memory",
        expiration_sweep_enabled=False,
    )


@pytest.fixture
def container(test_settings, clock) -> Container:
    return Container(test_settings, clock=clock)


@pytest_asyncio.fixture
async def client(container) -> AsyncClient:
    """
    HTTP client bound to the application.

    The ASGI lifespan is not run, so the sweeper stays stopped and tests
    trigger sweeps explicitly.
    """
    app = create_app(container=container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def library(container, alice, bob, carol, borrowed_book) -> Container:
    """Container seeded with the sample users and a borrowed book."""
    for user in (alice, bob, carol):
        await container.users.save(user)
    await container.users.save(User(id=UserId("99999999"), name="Dave", current_borrow_count=1))
    await container.books.save(borrowed_book)
    return container
