"""Book circulation DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from library.domain.entities.book import Book, BookStatus
from library.domain.entities.user import User


class BorrowBookInput(BaseModel):
    """Input DTO for borrowing a book."""

    user_id: str = Field(..., min_length=1, description="Borrowing user's identifier")
    book_id: str = Field(..., min_length=1, description="Book's identifier")

    model_config = {"frozen": True}


class ReturnBookInput(BaseModel):
    """Input DTO for returning a book."""

    user_id: str = Field(..., min_length=1, description="Returning user's identifier")
    book_id: str = Field(..., min_length=1, description="Book's identifier")

    model_config = {"frozen": True}


class PayFeesInput(BaseModel):
    """Input DTO for paying overdue fees."""

    user_id: str = Field(..., min_length=1, description="Paying user's identifier")
    amount: int = Field(..., gt=0, description="Amount paid, in yen")

    model_config = {"frozen": True}


class BookOutput(BaseModel):
    """Output DTO for book information."""

    id: str = Field(..., description="Book's identifier")
    title: str = Field(..., description="Title")
    author: str = Field(..., description="Author")
    status: BookStatus = Field(..., description="Circulation status")
    borrowed_by: Optional[str] = Field(None, description="Current borrower")
    borrowed_at: Optional[datetime] = Field(None, description="Time of borrowing")
    due_at: Optional[datetime] = Field(None, description="End of the loan period")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, book: Book) -> "BookOutput":
        """Create DTO from Book entity."""
        return cls(
            id=str(book.id),
            title=book.title,
            author=book.author,
            status=book.status,
            borrowed_by=str(book.borrowed_by) if book.borrowed_by else None,
            borrowed_at=book.borrowed_at,
            due_at=book.due_at(),
        )


class BorrowerOutput(BaseModel):
    """Output DTO for the borrowing user."""

    id: str = Field(..., description="User's identifier")
    name: str = Field(..., description="User's name")
    current_borrow_count: int = Field(..., description="Books currently borrowed")
    overdue_fees: int = Field(0, description="Unpaid overdue fees in yen")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, user: User) -> "BorrowerOutput":
        """Create DTO from User entity."""
        return cls(
            id=str(user.id),
            name=user.name,
            current_borrow_count=user.current_borrow_count,
            overdue_fees=user.overdue_fees,
        )


class BookCirculationOutput(BaseModel):
    """Output DTO for a completed borrow or return."""

    message: str = Field(..., description="Human-readable outcome")
    book: BookOutput = Field(..., description="Book after the operation")
    user: BorrowerOutput = Field(..., description="User after the operation")
    fulfilled_reservation_id: Optional[str] = Field(
        None, description="Reservation consumed by this borrow, if any"
    )
    overdue_fee: int = Field(0, description="Fee charged by this return, in yen")

    model_config = {"frozen": True}


class FeePaymentOutput(BaseModel):
    """Output DTO for a fee payment."""

    message: str = Field(..., description="Human-readable outcome")
    paid: int = Field(..., description="Amount paid, in yen")
    user: BorrowerOutput = Field(..., description="User after the payment")

    model_config = {"frozen": True}
