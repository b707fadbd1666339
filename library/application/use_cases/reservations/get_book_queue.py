"""Get book queue use case."""

from library.application.dto.reservation_dto import BookQueueOutput, ReservationOutput
from library.application.exceptions import NotFoundError, ResourceType
from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.clock import Clock, utc_now
from library.domain.value_objects.book_id import BookId


class GetBookQueueUseCase:
    """Use case for inspecting a book's waiting line."""

    def __init__(
        self,
        books: BookRepositoryPort,
        queue_service: ReservationQueueService,
        clock: Clock = utc_now,
    ):
        self.books = books
        self.queue_service = queue_service
        self.clock = clock

    async def execute(self, book_id: str) -> BookQueueOutput:
        """
        Get the ACTIVE reservations of a book in the order they will be served.

        Raises:
            NotFoundError: If book doesn't exist
        """
        bid = BookId(book_id)

        if await self.books.get_by_id(bid) is None:
            raise NotFoundError(ResourceType.BOOK, bid)

        now = self.clock()
        queue = await self.queue_service.get_queue(bid)

        return BookQueueOutput(
            book_id=str(bid),
            queue=[
                ReservationOutput.from_entity(r, now=now, queue_position=position)
                for position, r in enumerate(queue, start=1)
            ],
            length=len(queue),
        )
