"""Book repository port interface."""

from typing import Optional, Protocol

from library.domain.entities.book import Book
from library.domain.value_objects.book_id import BookId


class BookRepositoryPort(Protocol):
    """Repository interface for Book entity."""

    async def save(self, book: Book) -> None:
        """
        Insert or replace a book snapshot.

        Args:
            book: Book entity to persist
        """
        ...

    async def get_by_id(self, book_id: BookId) -> Optional[Book]:
        """
        Retrieve book by ID.

        Args:
            book_id: Book's unique identifier

        Returns:
            Book entity if found, None otherwise
        """
        ...
