"""Book circulation use cases."""

from library.application.use_cases.books.borrow_book import BorrowBookUseCase
from library.application.use_cases.books.pay_fees import PayFeesUseCase
from library.application.use_cases.books.return_book import ReturnBookUseCase

__all__ = ["BorrowBookUseCase", "PayFeesUseCase", "ReturnBookUseCase"]
