"""Return book use case."""

import logging

from library.application.dto.book_dto import (
    BookCirculationOutput,
    BookOutput,
    BorrowerOutput,
    ReturnBookInput,
)
from library.application.exceptions import (
    CirculationConflictError,
    CirculationOperation,
    NotFoundError,
    ResourceType,
)
from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.ports.outbound.event_bus_port import EventBusPort
from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.domain.clock import Clock, utc_now
from library.domain.events.book_events import BookAvailableEvent
from library.domain.services.overdue_fee_policy import OverdueFeePolicy
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ReturnBookUseCase:
    """Use case for returning a borrowed book to the shelf."""

    def __init__(
        self,
        users: UserRepositoryPort,
        books: BookRepositoryPort,
        event_bus: EventBusPort,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            users: User repository
            books: Book repository
            event_bus: Bus on which ``BookAvailableEvent`` is published
            clock: Source of the current time
        """
        self.users = users
        self.books = books
        self.event_bus = event_bus
        self.clock = clock

    async def execute(self, input_dto: ReturnBookInput) -> BookCirculationOutput:
        """
        Return a book, charge any overdue fee and announce that it is available.

        Args:
            input_dto: User and book identifiers

        Returns:
            Updated book and user, with the fee charged by this return

        Raises:
            NotFoundError: If user or book doesn't exist
            CirculationConflictError: If the book is not borrowed by this user
        """
        user_id = UserId(input_dto.user_id)
        book_id = BookId(input_dto.book_id)

        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(ResourceType.USER, user_id)

        book = await self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError(ResourceType.BOOK, book_id)

        if not book.is_borrowed_by(user_id):
            raise CirculationConflictError(
                "Book is not currently borrowed by this user",
                CirculationOperation.RETURN,
                book.status.value,
            )

        fee = OverdueFeePolicy.fee_for_return(book, self.clock())
        returned_book = book.return_book()
        updated_user = user.return_book(overdue_fee=fee)
        await self.books.save(returned_book)
        await self.users.save(updated_user)

        if fee:
            logger.info(f"Book {book_id} returned late by user {user_id}, fee {fee}")
        else:
            logger.info(f"Book {book_id} returned by user {user_id}")
        await self.event_bus.publish(BookAvailableEvent(book_id=book_id))

        message = "Book returned successfully"
        if fee:
            message += f". Overdue fee applied: ¥{fee}"

        return BookCirculationOutput(
            message=message,
            book=BookOutput.from_entity(returned_book),
            user=BorrowerOutput.from_entity(updated_user),
            overdue_fee=fee,
        )
