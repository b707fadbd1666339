"""Unit tests for ListUserReservationsUseCase and GetBookQueueUseCase."""

import pytest

from library.application.exceptions import NotFoundError
from library.application.use_cases.reservations.get_book_queue import GetBookQueueUseCase
from library.application.use_cases.reservations.list_user_reservations import (
    ListUserReservationsUseCase,
)
from library.domain.entities.reservation import ReservationStatus
from library.domain.value_objects.book_id import BookId


@pytest.fixture
def list_use_case(user_repo, reservation_repo, queue_service, clock):
    return ListUserReservationsUseCase(user_repo, reservation_repo, queue_service, clock)


@pytest.fixture
def queue_use_case(book_repo, queue_service, clock):
    return GetBookQueueUseCase(book_repo, queue_service, clock)


class TestListUserReservationsUseCase:
    """Test ListUserReservationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_positions(
        self, list_use_case, user_repo, queue_service, clock, alice, bob, book_id
    ):
        await user_repo.save(alice)
        other_book = BookId("BOOK000002")
        await queue_service.reserve_book(bob.id, other_book)
        clock.advance(minutes=1)
        older = (await queue_service.reserve_book(alice.id, book_id)).reservation
        clock.advance(minutes=1)
        newer = (await queue_service.reserve_book(alice.id, other_book)).reservation

        result = await list_use_case.execute(str(alice.id))

        assert result.user_id == str(alice.id)
        assert result.total == 2
        assert [r.id for r in result.reservations] == [str(newer.id), str(older.id)]
        assert result.reservations[0].queue_position == 2
        assert result.reservations[1].queue_position == 1

    @pytest.mark.asyncio
    async def test_ready_reservation_has_remaining_days(
        self, list_use_case, user_repo, queue_service, clock, alice, book_id
    ):
        await user_repo.save(alice)
        await queue_service.reserve_book(alice.id, book_id)
        await queue_service.notify_next_in_queue(book_id)
        clock.advance(days=1)

        result = await list_use_case.execute(str(alice.id))

        (reservation,) = result.reservations
        assert reservation.status == ReservationStatus.READY
        assert reservation.remaining_days == 2
        assert reservation.queue_position is None

    @pytest.mark.asyncio
    async def test_no_reservations(self, list_use_case, user_repo, alice):
        await user_repo.save(alice)

        result = await list_use_case.execute(str(alice.id))

        assert result.total == 0
        assert result.reservations == []

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, list_use_case):
        with pytest.raises(NotFoundError) as exc_info:
            await list_use_case.execute("12345678")
        assert exc_info.value.details["resource_type"] == "User"


class TestGetBookQueueUseCase:
    """Test GetBookQueueUseCase."""

    @pytest.mark.asyncio
    async def test_queue_in_fifo_order(
        self, queue_use_case, book_repo, queue_service, borrowed_book, clock, alice, bob, book_id
    ):
        await book_repo.save(borrowed_book)
        await queue_service.reserve_book(bob.id, book_id)
        clock.advance(seconds=1)
        await queue_service.reserve_book(alice.id, book_id)

        result = await queue_use_case.execute(str(book_id))

        assert result.book_id == str(book_id)
        assert result.length == 2
        assert [r.user_id for r in result.queue] == [str(bob.id), str(alice.id)]
        assert [r.queue_position for r in result.queue] == [1, 2]

    @pytest.mark.asyncio
    async def test_empty_queue(self, queue_use_case, book_repo, borrowed_book):
        await book_repo.save(borrowed_book)

        result = await queue_use_case.execute(str(borrowed_book.id))

        assert result.length == 0

    @pytest.mark.asyncio
    async def test_unknown_book_raises(self, queue_use_case):
        with pytest.raises(NotFoundError):
            await queue_use_case.execute("NOSUCHBOOK")
