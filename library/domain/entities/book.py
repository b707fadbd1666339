"""Book domain entity."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import ClassVar

from library.domain.clock import utc_now
from library.domain.exceptions import InvalidBookError, InvalidBookStateError
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.user_id import UserId


class BookStatus(str, Enum):
    """Circulation status of a book."""

    AVAILABLE = "available"
    BORROWED = "borrowed"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class Book:
    """
    Book entity representing a copy in the library catalogue.

    Invariant: a book has a borrower if and only if it is BORROWED.
    A loan is due LOAN_PERIOD after borrowing.
    """

    LOAN_PERIOD: ClassVar[timedelta] = timedelta(days=14)

    id: BookId
    title: str
    author: str
    status: BookStatus = BookStatus.AVAILABLE
    borrowed_by: UserId | None = None
    borrowed_at: datetime | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate book after initialization."""
        if not self.title or not self.title.strip():
            raise InvalidBookError("Title cannot be empty")

        if not self.author or not self.author.strip():
            raise InvalidBookError("Author cannot be empty")

        if self.status == BookStatus.BORROWED and self.borrowed_by is None:
            raise InvalidBookError("Borrowed book must have a borrower")

        if self.status != BookStatus.BORROWED and self.borrowed_by is not None:
            raise InvalidBookError("Only borrowed books can have a borrower")

    @classmethod
    def create(cls, title: str, author: str, book_id: BookId | None = None) -> "Book":
        """Create a new available book."""
        return cls(
            id=book_id or BookId.generate(),
            title=title,
            author=author,
            created_at=utc_now(),
        )

    def is_available(self) -> bool:
        """Check if the book is on the shelf."""
        return self.status == BookStatus.AVAILABLE

    def is_borrowed_by(self, user_id: UserId) -> bool:
        """Check if the given user currently has the book."""
        return self.borrowed_by == user_id

    def borrow(self, user_id: UserId, now: datetime | None = None) -> "Book":
        """
        Lend the book to a user.

        Args:
            user_id: Borrower
            now: Time of borrowing

        Returns:
            BORROWED snapshot

        Raises:
            InvalidBookStateError: If the book is not available
        """
        if not self.is_available():
            raise InvalidBookStateError(str(self.id), f"cannot borrow a {self.status.value} book")

        return replace(
            self,
            status=BookStatus.BORROWED,
            borrowed_by=user_id,
            borrowed_at=now or utc_now(),
        )

    def due_at(self) -> datetime | None:
        """Return when the current loan is due back, or None if not on loan."""
        if self.status != BookStatus.BORROWED or self.borrowed_at is None:
            return None
        return self.borrowed_at + self.LOAN_PERIOD

    def overdue_days(self, now: datetime | None = None) -> int:
        """
        Count whole days the current loan is past due.

        Returns:
            Days past the loan period, or 0 if not on loan or not yet overdue
        """
        if self.status != BookStatus.BORROWED or self.borrowed_at is None:
            return 0
        days_borrowed = ((now or utc_now()) - self.borrowed_at).days
        return max(0, days_borrowed - self.LOAN_PERIOD.days)

    def is_overdue(self, now: datetime | None = None) -> bool:
        return self.overdue_days(now) > 0

    def return_book(self) -> "Book":
        """
        Put the book back on the shelf.

        Raises:
            InvalidBookStateError: If the book is not borrowed
        """
        if self.status != BookStatus.BORROWED:
            raise InvalidBookStateError(str(self.id), "only borrowed books can be returned")

        return replace(
            self,
            status=BookStatus.AVAILABLE,
            borrowed_by=None,
            borrowed_at=None,
        )

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, Book):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title={self.title!r}, status={self.status.value})"
