"""
Reservation queue service.

Maintains a fair first-in, first-out waiting line per book and drives the
ready / expire / cascade lifecycle of reservations.
"""

import asyncio
import logging
import weakref
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.ports.outbound.event_bus_port import EventBusPort
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.domain.clock import Clock, utc_now
from library.domain.entities.reservation import Reservation, ReservationStatus
from library.domain.events.base import DomainEvent
from library.domain.events.reservation_events import (
    BookReservedEvent,
    ReservationExpiredEvent,
    ReservationReadyEvent,
)
from library.domain.exceptions import DomainException, ReservationAlreadyExistsError
from library.domain.services.reservation_queue_policy import ReservationQueuePolicy
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservationResult:
    """Outcome of a reservation attempt: the new reservation or the reason it failed."""

    success: bool
    reservation: Optional[Reservation] = None
    error: Optional[DomainException] = None

    @classmethod
    def ok(cls, reservation: Reservation) -> "ReservationResult":
        return cls(success=True, reservation=reservation)

    @classmethod
    def fail(cls, error: DomainException) -> "ReservationResult":
        return cls(success=False, error=error)


class ReservationQueueService:
    """
    Service owning every transition of persisted reservations.

    Concurrency:
        All mutations touching a book's reservations run under a per-book
        ``asyncio.Lock``, so two transitions never interleave on the same
        reservation and queue advancement always sees a consistent set of
        ACTIVE reservations. Events are published after the lock is
        released, which lets handlers call back into this service. A
        book's lock lives only while some coroutine uses it.

        Expiration sweeps do not overlap: a sweep requested while another
        is still running is skipped.

    Usage:
        service = ReservationQueueService(reservation_repo, event_bus)
        result = await service.reserve_book(user_id, book_id)
        if result.success:
            position = await service.get_queue_position(book_id, user_id)
    """

    def __init__(
        self,
        reservations: ReservationRepositoryPort,
        event_bus: EventBusPort,
        clock: Clock = utc_now,
        books: Optional[BookRepositoryPort] = None,
    ):
        """
        Initialize the service.

        Args:
            reservations: Reservation repository
            event_bus: Bus used to publish reservation events
            clock: Source of the current time
            books: Book repository; when given, the queue only advances for
                books that are on the shelf
        """
        self._reservations = reservations
        self._event_bus = event_bus
        self._clock = clock
        self._books = books
        self._book_locks: weakref.WeakValueDictionary[BookId, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._sweep_lock = asyncio.Lock()

    async def reserve_book(self, user_id: UserId, book_id: BookId) -> ReservationResult:
        """
        Add a user to a book's waiting line.

        Duplicate prevention is scoped to the (user, book) pair: a user may
        wait for many different books at once.

        Args:
            user_id: User placing the reservation
            book_id: Book being reserved

        Returns:
            Successful result with the ACTIVE reservation, or a failed result
            carrying ``ReservationAlreadyExistsError``
        """
        async with self._lock_for(book_id):
            existing = await self._reservations.list_by_user_and_book(user_id, book_id)

            if ReservationQueuePolicy.has_pending(existing):
                logger.info(
                    f"Rejected duplicate reservation: user={user_id} book={book_id}"
                )
                return ReservationResult.fail(
                    ReservationAlreadyExistsError(str(user_id), str(book_id))
                )

            now = self._clock()
            reservation = Reservation.create(user_id, book_id, now=now)
            await self._reservations.save(reservation)

        logger.info(
            f"Reservation {reservation.id} created: user={user_id} book={book_id}"
        )
        await self._publish(
            BookReservedEvent(
                reservation_id=reservation.id,
                user_id=user_id,
                book_id=book_id,
                occurred_at=now,
            )
        )
        return ReservationResult.ok(reservation)

    async def get_queue(self, book_id: BookId) -> list[Reservation]:
        """Return the ACTIVE reservations of a book in FIFO order."""
        active = await self._reservations.list_active_by_book(book_id)
        return ReservationQueuePolicy.order(active)

    async def get_next_in_queue(self, book_id: BookId) -> Optional[Reservation]:
        """
        Return the reservation that will be served next.

        Args:
            book_id: Book whose queue to inspect

        Returns:
            Earliest ACTIVE reservation, or None if nobody is waiting
        """
        active = await self._reservations.list_active_by_book(book_id)
        return ReservationQueuePolicy.next_in_line(active)

    async def get_queue_position(self, book_id: BookId, user_id: UserId) -> int:
        """
        Return a user's 1-based position in a book's queue.

        Returns:
            Position, or 0 if the user has no ACTIVE reservation for the book
        """
        active = await self._reservations.list_active_by_book(book_id)
        return ReservationQueuePolicy.position_of(active, user_id)

    async def notify_next_in_queue(self, book_id: BookId) -> Optional[Reservation]:
        """
        Hold the book for the next user in line.

        Marks the head of the queue READY (starting the hold period) and
        publishes ``ReservationReadyEvent``. An empty queue is not an error.

        Args:
            book_id: Book that became available

        Returns:
            The READY reservation, or None if nobody was notified
        """
        async with self._lock_for(book_id):
            ready = await self._advance_queue(book_id, self._clock())

        if ready is not None:
            await self._publish(self._ready_event(ready))
        return ready

    async def process_expired_reservations(self) -> int:
        """
        Expire READY reservations whose hold period has lapsed.

        Each expiry publishes ``ReservationExpiredEvent`` and cascades to the
        next user waiting for the same book. Safe to call repeatedly; a call
        made while a previous sweep is still running does nothing.

        Returns:
            Number of reservations expired by this sweep
        """
        if self._sweep_lock.locked():
            logger.warning("Expiration sweep already in progress, skipping")
            return 0

        async with self._sweep_lock:
            now = self._clock()
            candidates = await self._reservations.list_by_status(ReservationStatus.READY)
            expired_count = 0

            for candidate in candidates:
                if not candidate.is_expired(now):
                    continue

                events: list[DomainEvent] = []
                async with self._lock_for(candidate.book_id):
                    current = await self._reservations.get_by_id(candidate.id)
                    if current is None or not current.is_expired(now):
                        continue

                    events.append(await self._expire(current, now))
                    expired_count += 1

                    ready = await self._advance_queue(current.book_id, now)
                    if ready is not None:
                        events.append(self._ready_event(ready))

                for event in events:
                    await self._publish(event)

        if expired_count:
            logger.info(f"Expiration sweep finished: {expired_count} reservation(s) expired")
        return expired_count

    async def release_lapsed_hold(self, book_id: BookId) -> Optional[Reservation]:
        """
        Settle who holds a book right now, without waiting for the next sweep.

        A READY reservation of the book whose hold has lapsed is expired and
        the book passes to the next user in line, exactly as a sweep would
        do it.

        Args:
            book_id: Book about to change hands

        Returns:
            The reservation currently holding the book, or None if nobody does
        """
        events: list[DomainEvent] = []

        async with self._lock_for(book_id):
            now = self._clock()
            reservations = await self._reservations.list_by_book(book_id)

            for lapsed in [r for r in reservations if r.is_expired(now)]:
                events.append(await self._expire(lapsed, now))

            holder = next((r for r in reservations if r.is_ready(now)), None)
            if holder is None and events:
                holder = await self._advance_queue(book_id, now)
                if holder is not None:
                    events.append(self._ready_event(holder))

        for event in events:
            await self._publish(event)
        return holder

    async def cancel_reservation(self, reservation: Reservation) -> Reservation:
        """
        Cancel a reservation at the user's request.

        Cancelling a READY reservation frees the held copy for the next
        user in line, exactly as expiration does.

        Args:
            reservation: Reservation to cancel

        Returns:
            CANCELLED snapshot

        Raises:
            InvalidReservationStateTransitionError: If FULFILLED or EXPIRED
        """
        ready: Optional[Reservation] = None

        async with self._lock_for(reservation.book_id):
            current = await self._reservations.get_by_id(reservation.id) or reservation
            cancelled = current.cancel()
            await self._reservations.save(cancelled)

            if current.status == ReservationStatus.READY:
                ready = await self._advance_queue(current.book_id, self._clock())

        logger.info(f"Reservation {cancelled.id} cancelled by user {cancelled.user_id}")
        if ready is not None:
            await self._publish(self._ready_event(ready))
        return cancelled

    async def fulfill_reservation(self, reservation: Reservation) -> Reservation:
        """
        Mark a READY reservation as fulfilled (the user borrowed the book).

        The slot is consumed, so the queue does not advance.

        Raises:
            InvalidReservationStateTransitionError: If not READY
            ReservationExpiredError: If the hold period has lapsed
        """
        async with self._lock_for(reservation.book_id):
            current = await self._reservations.get_by_id(reservation.id) or reservation
            fulfilled = current.fulfill(self._clock())
            await self._reservations.save(fulfilled)

        logger.info(f"Reservation {fulfilled.id} fulfilled by user {fulfilled.user_id}")
        return fulfilled

    async def _expire(self, reservation: Reservation, now: datetime) -> ReservationExpiredEvent:
        # Caller must hold the book lock.
        expired = reservation.expire()
        await self._reservations.save(expired)
        logger.info(
            f"Reservation {expired.id} expired: user {expired.user_id} "
            f"missed the hold window for book {expired.book_id}"
        )
        return ReservationExpiredEvent(
            reservation_id=expired.id,
            user_id=expired.user_id,
            book_id=expired.book_id,
            occurred_at=now,
        )

    async def _advance_queue(self, book_id: BookId, now: datetime) -> Optional[Reservation]:
        # Caller must hold the book lock.
        if self._books is not None:
            book = await self._books.get_by_id(book_id)
            if book is not None and not book.is_available():
                logger.info(
                    f"Book {book_id} is {book.status.value}, queue not advanced"
                )
                return None

        reservations = await self._reservations.list_by_book(book_id)

        holder = next((r for r in reservations if r.is_ready(now)), None)
        if holder is not None:
            logger.info(
                f"Book {book_id} is already held by reservation {holder.id}, "
                "queue not advanced"
            )
            return None

        next_reservation = ReservationQueuePolicy.next_in_line(reservations)
        if next_reservation is None:
            logger.info(f"No more reservations in queue for book {book_id}")
            return None

        ready = next_reservation.mark_as_ready(now)
        await self._reservations.save(ready)
        logger.info(
            f"Book {book_id} is now held for user {ready.user_id} "
            f"(reservation {ready.id}) until {ready.expires_at.isoformat()}"
        )
        return ready

    def _ready_event(self, reservation: Reservation) -> ReservationReadyEvent:
        return ReservationReadyEvent(
            reservation_id=reservation.id,
            user_id=reservation.user_id,
            book_id=reservation.book_id,
            expires_at=reservation.expires_at,
            occurred_at=reservation.ready_at,
        )

    async def _publish(self, event: DomainEvent) -> None:
        failures = await self._event_bus.publish(event)
        if failures:
            logger.warning(
                f"{len(failures)} handler(s) failed for {event.event_type} "
                f"event {event.event_id}"
            )

    def _lock_for(self, book_id: BookId) -> asyncio.Lock:
        # Entries drop out once no coroutine holds or waits on the lock.
        lock = self._book_locks.get(book_id)
        if lock is None:
            lock = asyncio.Lock()
            self._book_locks[book_id] = lock
        return lock
