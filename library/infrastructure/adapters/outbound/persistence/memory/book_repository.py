"""In-memory implementation of BookRepositoryPort."""

from typing import Optional

from library.application.ports.outbound.book_repository_port import BookRepositoryPort
from library.domain.entities.book import Book
from library.domain.value_objects.book_id import BookId


class InMemoryBookRepository(BookRepositoryPort):
    """Dict-backed book store keyed by the raw book ID."""

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}

    async def save(self, book: Book) -> None:
        self._books[str(book.id)] = book

    async def get_by_id(self, book_id: BookId) -> Optional[Book]:
        return self._books.get(str(book_id))

    def clear(self) -> None:
        self._books.clear()
