"""User domain entity."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import ClassVar

from library.domain.clock import utc_now
from library.domain.exceptions import (
    InvalidFeePaymentError,
    InvalidUserError,
    InvalidUserStateTransitionError,
)
from library.domain.value_objects.user_id import UserId


class UserStatus(str, Enum):
    """Membership status of a library user."""

    ACTIVE = "active"
    SUSPENDED = "suspended"


@dataclass(frozen=True)
class User:
    """
    User entity representing a library member.

    The reservation queue only needs identity and membership status;
    the borrow counter and overdue fees support the borrow/return flow.
    Fees are whole yen.
    """

    MAX_BORROW_LIMIT: ClassVar[int] = 5

    id: UserId
    name: str
    status: UserStatus = UserStatus.ACTIVE
    current_borrow_count: int = 0
    overdue_fees: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate user after initialization."""
        if not self.name or not self.name.strip():
            raise InvalidUserError("Name cannot be empty")

        if len(self.name) > 100:
            raise InvalidUserError("Name cannot exceed 100 characters")

        if not 0 <= self.current_borrow_count <= self.MAX_BORROW_LIMIT:
            raise InvalidUserError(
                f"Borrow count must be between 0 and {self.MAX_BORROW_LIMIT}"
            )

        if self.overdue_fees < 0:
            raise InvalidUserError("Overdue fees cannot be negative")

    @classmethod
    def create(cls, name: str, user_id: UserId | None = None) -> "User":
        """Create a new active user with no borrowed books."""
        return cls(
            id=user_id or UserId.generate(),
            name=name,
            created_at=utc_now(),
        )

    def is_active(self) -> bool:
        """Check if the membership is active."""
        return self.status == UserStatus.ACTIVE

    def can_borrow(self) -> bool:
        """
        Check if the user may borrow another book.

        Returns:
            True if active, below the borrow limit and with no unpaid fees
        """
        return (
            self.is_active()
            and self.current_borrow_count < self.MAX_BORROW_LIMIT
            and not self.has_unpaid_fees()
        )

    def has_unpaid_fees(self) -> bool:
        return self.overdue_fees > 0

    def borrow_book(self) -> "User":
        """
        Record a borrowed book.

        Raises:
            InvalidUserStateTransitionError: If the user cannot borrow
        """
        if not self.can_borrow():
            raise InvalidUserStateTransitionError(self.status.value, "borrow a book for")
        return replace(self, current_borrow_count=self.current_borrow_count + 1)

    def return_book(self, overdue_fee: int = 0) -> "User":
        """
        Record a returned book, charging any overdue fee.

        Args:
            overdue_fee: Fee owed for returning the book late

        Raises:
            InvalidUserStateTransitionError: If nothing is borrowed
        """
        if self.current_borrow_count <= 0:
            raise InvalidUserStateTransitionError("no borrowed books", "return a book for")
        return replace(
            self,
            current_borrow_count=self.current_borrow_count - 1,
            overdue_fees=self.overdue_fees + overdue_fee,
        )

    def pay_fees(self, amount: int) -> "User":
        """
        Pay off part or all of the outstanding overdue fees.

        Raises:
            InvalidFeePaymentError: If the amount is not positive or exceeds
                what is owed
        """
        if amount <= 0 or amount > self.overdue_fees:
            raise InvalidFeePaymentError(amount, self.overdue_fees)
        return replace(self, overdue_fees=self.overdue_fees - amount)

    def suspend(self) -> "User":
        """Suspend the membership."""
        if self.status == UserStatus.SUSPENDED:
            raise InvalidUserStateTransitionError("suspended", "suspend")
        return replace(self, status=UserStatus.SUSPENDED)

    def activate(self) -> "User":
        """Reactivate a suspended membership."""
        if self.status == UserStatus.ACTIVE:
            raise InvalidUserStateTransitionError("active", "activate")
        return replace(self, status=UserStatus.ACTIVE)

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name!r}, status={self.status.value})"
