"""Borrow book use case."""

from library.application.dto.book_dto import (
    BookCirculationOutput,
    BookOutput,
    BorrowBookInput,
    BorrowerOutput,
)
from library.application.exceptions import (
    BookHeldError,
    CirculationConflictError,
    CirculationOperation,
    NotFoundError,
    ResourceType,
    UnpaidFeesError,
)
from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.clock import Clock, utc_now
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId


class BorrowBookUseCase:
    """
    Use case for lending an available book to a user.

    While a book is held for a READY reservation only the reservation's
    owner may borrow it, and doing so fulfils the reservation. A hold
    whose window has lapsed is expired first and the book passes to the
    next user in line, so nobody can jump the queue between sweeps.
    """

    def __init__(
        self,
        users: UserRepositoryPort,
        books: BookRepositoryPort,
        queue_service: ReservationQueueService,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            users: User repository
            books: Book repository
            queue_service: Reservation queue service
            clock: Source of the current time
        """
        self.users = users
        self.books = books
        self.queue_service = queue_service
        self.clock = clock

    async def execute(self, input_dto: BorrowBookInput) -> BookCirculationOutput:
        """
        Borrow a book.

        Args:
            input_dto: User and book identifiers

        Returns:
            Updated book and user

        Raises:
            NotFoundError: If user or book doesn't exist
            UnpaidFeesError: If the user owes overdue fees
            BookHeldError: If the book is held for someone else
            CirculationConflictError: If the user cannot borrow or the book
                is out
        """
        user_id = UserId(input_dto.user_id)
        book_id = BookId(input_dto.book_id)

        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(ResourceType.USER, user_id)

        book = await self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError(ResourceType.BOOK, book_id)

        if user.has_unpaid_fees():
            raise UnpaidFeesError(user_id, user.overdue_fees)

        if not user.can_borrow():
            raise CirculationConflictError(
                "User cannot borrow more books",
                CirculationOperation.BORROW,
                f"{user.status.value}, {user.current_borrow_count} borrowed",
            )

        if not book.is_available():
            raise CirculationConflictError(
                "Book is not available",
                CirculationOperation.BORROW,
                book.status.value,
            )

        holder = await self.queue_service.release_lapsed_hold(book_id)
        if holder is not None and holder.user_id != user_id:
            raise BookHeldError(book_id, holder.expires_at)

        fulfilled = None
        if holder is not None:
            fulfilled = await self.queue_service.fulfill_reservation(holder)

        borrowed_book = book.borrow(user_id, self.clock())
        updated_user = user.borrow_book()
        await self.books.save(borrowed_book)
        await self.users.save(updated_user)

        return BookCirculationOutput(
            message="Book borrowed successfully",
            book=BookOutput.from_entity(borrowed_book),
            user=BorrowerOutput.from_entity(updated_user),
            fulfilled_reservation_id=str(fulfilled.id) if fulfilled else None,
        )
