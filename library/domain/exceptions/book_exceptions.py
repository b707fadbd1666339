"""Book domain exceptions."""

from library.domain.exceptions.base import DomainException


class BookDomainException(DomainException):
    """Base exception for book-related domain errors."""


class InvalidBookIdError(BookDomainException):
    """Raised when a book identifier is malformed."""

    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid book ID '{value}': must be 10 alphanumeric characters",
            code="INVALID_BOOK_ID"
        )


class BookNotFoundError(BookDomainException):
    """Raised when a book cannot be found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Book not found: {identifier}",
            code="BOOK_NOT_FOUND"
        )


class InvalidBookError(BookDomainException):
    """Raised when book attributes violate an invariant."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid book: {reason}",
            code="INVALID_BOOK"
        )


class InvalidBookStateError(BookDomainException):
    """Raised when attempting an operation on a book in the wrong state."""

    def __init__(self, book_id: str, reason: str):
        super().__init__(
            message=f"Invalid book state for book {book_id}: {reason}",
            code="INVALID_BOOK_STATE"
        )
