"""Unit tests for ExpirationSweeper."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from library.infrastructure.scheduling import ExpirationSweeper


@pytest.fixture
def mock_queue_service():
    """Create a mock reservation queue service."""
    service = Mock()
    service.process_expired_reservations = AsyncMock(return_value=2)
    return service


class TestExpirationSweeper:
    """Test ExpirationSweeper."""

    def test_interval_must_be_positive(self, mock_queue_service):
        with pytest.raises(ValueError):
            ExpirationSweeper(mock_queue_service, interval_seconds=0)

    @pytest.mark.asyncio
    async def test_run_once(self, mock_queue_service):
        sweeper = ExpirationSweeper(mock_queue_service, interval_seconds=60)

        assert await sweeper.run_once() == 2
        mock_queue_service.process_expired_reservations.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_loop_sweeps_periodically(self, mock_queue_service):
        sweeper = ExpirationSweeper(mock_queue_service, interval_seconds=0.01)

        sweeper.start()
        assert sweeper.running
        await asyncio.sleep(0.05)
        await sweeper.stop()

        assert not sweeper.running
        assert mock_queue_service.process_expired_reservations.await_count >= 2

    @pytest.mark.asyncio
    async def test_loop_survives_failing_sweep(self, mock_queue_service):
        calls = []

        async def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("db down")
            return 0

        mock_queue_service.process_expired_reservations.side_effect = flaky
        sweeper = ExpirationSweeper(mock_queue_service, interval_seconds=0.01)

        sweeper.start()
        await asyncio.sleep(0.05)
        still_running = sweeper.running
        await sweeper.stop()

        assert still_running
        assert mock_queue_service.process_expired_reservations.await_count >= 2

    @pytest.mark.asyncio
    async def test_start_twice_keeps_one_task(self, mock_queue_service):
        sweeper = ExpirationSweeper(mock_queue_service, interval_seconds=60)

        sweeper.start()
        task = sweeper._task
        sweeper.start()

        assert sweeper._task is task
        await sweeper.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self, mock_queue_service):
        sweeper = ExpirationSweeper(mock_queue_service, interval_seconds=60)

        await sweeper.stop()

        assert not sweeper.running
