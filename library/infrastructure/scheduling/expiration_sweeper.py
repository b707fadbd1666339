"""Periodic expiration of lapsed reservation holds."""

import asyncio
import logging
from typing import Optional

from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)

logger = logging.getLogger(__name__)


class ExpirationSweeper:
    """
    Runs ``process_expired_reservations`` on a fixed interval.

    A failing sweep is logged and the loop carries on with the next tick.

    Usage:
        sweeper = ExpirationSweeper(queue_service, interval_seconds=60)
        sweeper.start()
        ...
        await sweeper.stop()
    """

    def __init__(self, queue_service: ReservationQueueService, interval_seconds: float):
        """
        Initialize the sweeper.

        Args:
            queue_service: Service performing the expirations
            interval_seconds: Delay between two sweeps
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.queue_service = queue_service
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> int:
        """
        Run a single sweep.

        Returns:
            Number of reservations expired
        """
        return await self.queue_service.process_expired_reservations()

    def start(self) -> None:
        """Start the background loop on the running event loop. No-op if already running."""
        if self.running:
            return

        logger.info(f"Starting expiration sweeper (interval={self.interval_seconds}s)")
        self._task = asyncio.create_task(self._loop(), name="expiration-sweeper")

    async def stop(self) -> None:
        """Cancel the background loop and wait for it to finish."""
        if self._task is None:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None

        logger.info("Expiration sweeper stopped")

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.run_once()
            except Exception:
                logger.exception("Expiration sweep failed")
