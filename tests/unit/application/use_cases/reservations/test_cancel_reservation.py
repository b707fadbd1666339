"""Unit tests for CancelReservationUseCase."""

from unittest.mock import AsyncMock, Mock

import pytest

from library.application.dto.reservation_dto import (
    CancelReservationInput,
    ReservationFailureReason,
)
from library.application.use_cases.reservations.cancel_reservation import (
    CancelReservationUseCase,
)
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.exceptions import InvalidReservationIdError


@pytest.fixture
def use_case(reservation_repo, queue_service, clock):
    return CancelReservationUseCase(reservation_repo, queue_service, clock)


def cancel_input(reservation: Reservation) -> CancelReservationInput:
    return CancelReservationInput(reservation_id=str(reservation.id))


class TestCancelReservationUseCase:
    """Test CancelReservationUseCase."""

    @pytest.mark.asyncio
    async def test_cancel_active(self, use_case, queue_service, alice, book_id):
        """Test cancelling a reservation that is waiting in the queue."""
        # Arrange
        placed = (await queue_service.reserve_book(alice.id, book_id)).reservation

        # Act
        result = await use_case.execute(cancel_input(placed))

        # Assert
        assert result.success
        assert result.message == "Reservation cancelled successfully"
        assert result.reservation.status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancel_ready_notifies_next(
        self, use_case, queue_service, reservation_repo, clock, alice, bob, book_id
    ):
        first = (await queue_service.reserve_book(alice.id, book_id)).reservation
        clock.advance(minutes=5)
        second = (await queue_service.reserve_book(bob.id, book_id)).reservation
        await queue_service.notify_next_in_queue(book_id)

        result = await use_case.execute(cancel_input(first))

        assert result.success
        assert (await reservation_repo.get_by_id(second.id)).status == ReservationStatus.READY

    @pytest.mark.asyncio
    async def test_unknown_reservation(self, use_case):
        result = await use_case.execute(CancelReservationInput(reservation_id="RES0000000000"))

        assert not result.success
        assert result.reason == ReservationFailureReason.RESERVATION_NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("terminal", ["fulfilled", "expired"])
    async def test_terminal_reservation_not_cancellable(
        self, use_case, reservation_repo, clock, alice, book_id, terminal
    ):
        ready = Reservation.create(alice.id, book_id, now=clock()).mark_as_ready(clock())
        done = ready.fulfill(clock()) if terminal == "fulfilled" else ready.expire()
        await reservation_repo.save(done)

        result = await use_case.execute(cancel_input(done))

        assert result.reason == ReservationFailureReason.NOT_CANCELLABLE
        assert result.message == f"Cannot cancel {terminal} reservation"
        assert (await reservation_repo.get_by_id(done.id)).status == done.status

    @pytest.mark.asyncio
    async def test_expired_between_check_and_cancel(
        self, use_case, reservation_repo, clock, alice, book_id
    ):
        """A sweep expiring the hold mid-request yields a refusal, not an error."""
        ready = Reservation.create(alice.id, book_id, now=clock()).mark_as_ready(clock())
        expired = ready.expire()
        await reservation_repo.save(expired)
        reservation_repo.get_by_id = AsyncMock(side_effect=[ready, expired])

        result = await use_case.execute(cancel_input(ready))

        assert not result.success
        assert result.reason == ReservationFailureReason.NOT_CANCELLABLE
        assert result.message == "Cannot cancel expired reservation"

    @pytest.mark.asyncio
    async def test_already_cancelled(self, use_case, reservation_repo, clock, alice, book_id):
        cancelled = Reservation.create(alice.id, book_id, now=clock()).cancel()
        await reservation_repo.save(cancelled)

        result = await use_case.execute(cancel_input(cancelled))

        assert result.reason == ReservationFailureReason.ALREADY_CANCELLED

    @pytest.mark.asyncio
    async def test_refusals_do_not_reach_queue_service(self, reservation_repo, clock):
        queue_service = Mock()
        queue_service.cancel_reservation = AsyncMock()
        use_case = CancelReservationUseCase(reservation_repo, queue_service, clock)

        await use_case.execute(CancelReservationInput(reservation_id="RES0000000000"))

        queue_service.cancel_reservation.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_id_raises(self, use_case):
        with pytest.raises(InvalidReservationIdError):
            await use_case.execute(CancelReservationInput(reservation_id="42"))
