"""Unit tests for the in-memory repositories."""

import pytest

from library.domain.entities.book import Book
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.value_objects.book_id import BookId


class TestInMemoryReservationRepository:
    """Test InMemoryReservationRepository."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, reservation_repo, clock, alice, book_id):
        reservation = Reservation.create(alice.id, book_id, now=clock())

        await reservation_repo.save(reservation)

        assert await reservation_repo.get_by_id(reservation.id) is reservation

    @pytest.mark.asyncio
    async def test_save_replaces_snapshot_in_place(
        self, reservation_repo, clock, alice, bob, book_id
    ):
        first = Reservation.create(alice.id, book_id, now=clock())
        second = Reservation.create(bob.id, book_id, now=clock())
        await reservation_repo.save(first)
        await reservation_repo.save(second)

        await reservation_repo.save(first.mark_as_ready(clock()))

        listed = await reservation_repo.list_by_book(book_id)
        assert [r.id for r in listed] == [first.id, second.id]
        assert listed[0].status == ReservationStatus.READY

    @pytest.mark.asyncio
    async def test_filters(self, reservation_repo, clock, alice, bob, book_id):
        other_book = BookId("BOOK000002")
        waiting = Reservation.create(alice.id, book_id, now=clock())
        cancelled = Reservation.create(bob.id, book_id, now=clock()).cancel()
        elsewhere = Reservation.create(alice.id, other_book, now=clock())
        for reservation in (waiting, cancelled, elsewhere):
            await reservation_repo.save(reservation)

        assert await reservation_repo.list_active_by_book(book_id) == [waiting]
        assert await reservation_repo.list_by_book(book_id) == [waiting, cancelled]
        assert await reservation_repo.list_by_status(ReservationStatus.CANCELLED) == [cancelled]
        assert await reservation_repo.list_by_user(alice.id) == [waiting, elsewhere]
        assert await reservation_repo.list_by_user_and_book(alice.id, other_book) == [elsewhere]
        assert len(await reservation_repo.list_all()) == 3

    @pytest.mark.asyncio
    async def test_delete(self, reservation_repo, clock, alice, book_id):
        reservation = Reservation.create(alice.id, book_id, now=clock())
        await reservation_repo.save(reservation)

        await reservation_repo.delete(reservation.id)
        await reservation_repo.delete(reservation.id)

        assert await reservation_repo.get_by_id(reservation.id) is None

    @pytest.mark.asyncio
    async def test_clear(self, reservation_repo, clock, alice, book_id):
        await reservation_repo.save(Reservation.create(alice.id, book_id, now=clock()))

        reservation_repo.clear()

        assert await reservation_repo.list_all() == []


class TestInMemoryUserAndBookRepositories:
    """Test InMemoryUserRepository and InMemoryBookRepository."""

    @pytest.mark.asyncio
    async def test_user_round_trip(self, user_repo, alice):
        await user_repo.save(alice)
        assert await user_repo.get_by_id(alice.id) is alice

        user_repo.clear()
        assert await user_repo.get_by_id(alice.id) is None

    @pytest.mark.asyncio
    async def test_book_lookup_normalizes_id(self, book_repo):
        book = Book.create("Refactoring", "Martin Fowler", BookId("ABC123DEFG"))
        await book_repo.save(book)

        assert await book_repo.get_by_id(BookId("abc123defg")) is book
