"""Reserve book use case."""

from library.application.dto.reservation_dto import (
    ReservationFailureReason,
    ReservationOutput,
    ReserveBookInput,
    ReserveBookOutput,
)
from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.clock import Clock, utc_now
from library.domain.services.reservation_queue_policy import ReservationQueuePolicy
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId


class ReserveBookUseCase:
    """Use case for placing a user in a book's waiting line."""

    def __init__(
        self,
        users: UserRepositoryPort,
        books: BookRepositoryPort,
        reservations: ReservationRepositoryPort,
        queue_service: ReservationQueueService,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            users: User repository
            books: Book repository
            reservations: Reservation repository
            queue_service: Reservation queue service
            clock: Source of the current time
        """
        self.users = users
        self.books = books
        self.reservations = reservations
        self.queue_service = queue_service
        self.clock = clock

    async def execute(self, input_dto: ReserveBookInput) -> ReserveBookOutput:
        """
        Reserve a book for a user.

        Args:
            input_dto: User and book identifiers

        Returns:
            Successful output with the reservation and queue position, or a
            failed output with the refusal reason

        Raises:
            InvalidUserIdError: If the user ID is malformed
            InvalidBookIdError: If the book ID is malformed
        """
        user_id = UserId(input_dto.user_id)
        book_id = BookId(input_dto.book_id)

        user = await self.users.get_by_id(user_id)
        if user is None:
            return ReserveBookOutput.failure(
                ReservationFailureReason.USER_NOT_FOUND, "User not found"
            )

        if not user.is_active():
            return ReserveBookOutput.failure(
                ReservationFailureReason.USER_INACTIVE,
                "Suspended users cannot reserve books",
            )

        book = await self.books.get_by_id(book_id)
        if book is None:
            return ReserveBookOutput.failure(
                ReservationFailureReason.BOOK_NOT_FOUND, "Book not found"
            )

        # A returned book stays AVAILABLE while it is held for the queue.
        if book.is_available():
            existing = await self.reservations.list_by_book(book_id)
            if not ReservationQueuePolicy.has_pending(existing):
                return ReserveBookOutput.failure(
                    ReservationFailureReason.BOOK_AVAILABLE,
                    "Book is currently available. Please borrow it directly "
                    "instead of reserving.",
                )

        result = await self.queue_service.reserve_book(user_id, book_id)
        if not result.success:
            return ReserveBookOutput.failure(
                ReservationFailureReason.ALREADY_RESERVED,
                result.error.message if result.error else "Failed to reserve book",
            )

        position = await self.queue_service.get_queue_position(book_id, user_id)

        return ReserveBookOutput(
            success=True,
            message=f"Book reserved successfully. You are #{position} in the queue.",
            reservation=ReservationOutput.from_entity(
                result.reservation, now=self.clock(), queue_position=position
            ),
        )
