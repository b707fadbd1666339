"""
Book API routes.

This module provides:
- GET /books/{book_id}/queue - Waiting line of a book
- POST /books/{book_id}/borrow - Borrow a book
- POST /books/{book_id}/return - Return a book
"""

from fastapi import APIRouter

from library.application.dto.book_dto import (
    BookCirculationOutput,
    BorrowBookInput,
    ReturnBookInput,
)
from library.application.dto.reservation_dto import BookQueueOutput
from library.infrastructure.adapters.inbound.http.dependencies import (
    BookQueueDep,
    BorrowBookDep,
    ReturnBookDep,
)
from library.infrastructure.adapters.inbound.http.schemas import BookCirculationRequest

router = APIRouter(prefix="/books", tags=["Books"])


@router.get(
    "/{book_id}/queue",
    response_model=BookQueueOutput,
    summary="Get a book's waiting line",
    responses={404: {"description": "Book not found"}},
)
async def get_book_queue(book_id: str, use_case: BookQueueDep) -> BookQueueOutput:
    """ACTIVE reservations of the book in the order they will be served."""
    return await use_case.execute(book_id)


@router.post(
    "/{book_id}/borrow",
    response_model=BookCirculationOutput,
    summary="Borrow a book",
    responses={
        404: {"description": "User or book not found"},
        409: {
            "description": "Book unavailable, held for another user, "
            "borrow limit reached or fees unpaid"
        },
    },
)
async def borrow_book(
    book_id: str, body: BookCirculationRequest, use_case: BorrowBookDep
) -> BookCirculationOutput:
    """Borrow an available book, fulfilling the user's held reservation if any."""
    return await use_case.execute(BorrowBookInput(user_id=body.user_id, book_id=book_id))


@router.post(
    "/{book_id}/return",
    response_model=BookCirculationOutput,
    summary="Return a book",
    responses={
        404: {"description": "User or book not found"},
        409: {"description": "Book is not borrowed by this user"},
    },
)
async def return_book(
    book_id: str, body: BookCirculationRequest, use_case: ReturnBookDep
) -> BookCirculationOutput:
    """Return a book, charging any overdue fee; the next user in line is notified."""
    return await use_case.execute(ReturnBookInput(user_id=body.user_id, book_id=book_id))
