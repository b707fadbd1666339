"""
Application layer exceptions.

Circulation and query use cases raise these when a request names a user,
book or reservation that does not exist, or asks for a step the current
circulation state forbids. Reservation requests report the same
situations as typed failure outputs instead.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar


class ResourceType(str, Enum):
    """Kinds of resource a request can reference."""

    USER = "User"
    BOOK = "Book"
    RESERVATION = "Reservation"


class CirculationOperation(str, Enum):
    """Circulation steps that can be refused."""

    BORROW = "borrow"
    RETURN = "return"


class ApplicationError(Exception):
    """Base exception for application errors; ``code`` is what API clients see."""

    code: ClassVar[str] = "APPLICATION_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code}, details: {self.details})"


class NotFoundError(ApplicationError):
    """Raised when a referenced user, book or reservation does not resolve."""

    code = "NOT_FOUND"

    def __init__(self, resource_type: ResourceType, resource_id: object):
        self.resource_type = resource_type
        self.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type.value} not found",
            {"resource_type": resource_type.value, "resource_id": self.resource_id},
        )


class CirculationConflictError(ApplicationError):
    """
    Raised when a circulation step conflicts with the current state.

    ``current_state`` names what blocked the step, e.g. the book's status,
    ``held`` or ``fees_outstanding``.
    """

    code = "CONFLICT"

    def __init__(
        self,
        message: str,
        operation: CirculationOperation,
        current_state: str,
        **details: Any,
    ):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message,
            {"operation": operation.value, "current_state": current_state, **details},
        )


class BookHeldError(CirculationConflictError):
    """Raised when someone other than the holder tries to borrow a held book."""

    def __init__(self, book_id: object, held_until: datetime | None):
        super().__init__(
            "Book is held for another user's reservation",
            CirculationOperation.BORROW,
            "held",
            book_id=str(book_id),
            held_until=held_until.isoformat() if held_until else None,
        )


class UnpaidFeesError(CirculationConflictError):
    """Raised when a user with outstanding overdue fees tries to borrow."""

    def __init__(self, user_id: object, outstanding_fees: int):
        self.outstanding_fees = outstanding_fees
        super().__init__(
            "User must pay overdue fees before borrowing",
            CirculationOperation.BORROW,
            "fees_outstanding",
            user_id=str(user_id),
            outstanding_fees=outstanding_fees,
        )
