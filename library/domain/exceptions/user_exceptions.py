"""User domain exceptions."""

from library.domain.exceptions.base import DomainException


class UserDomainException(DomainException):
    """Base exception for user-related domain errors."""


class InvalidUserIdError(UserDomainException):
    """Raised when a user identifier is malformed."""

    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid user ID '{value}': must be exactly 8 digits",
            code="INVALID_USER_ID"
        )


class UserNotFoundError(UserDomainException):
    """Raised when a user cannot be found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"User not found: {identifier}",
            code="USER_NOT_FOUND"
        )


class InvalidUserError(UserDomainException):
    """Raised when user attributes violate an invariant."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid user: {reason}",
            code="INVALID_USER"
        )


class InvalidUserStateTransitionError(UserDomainException):
    """Raised when attempting an invalid state transition."""

    def __init__(self, current_state: str, attempted_transition: str):
        super().__init__(
            message=f"Cannot {attempted_transition} user in state: {current_state}",
            code="INVALID_USER_STATE_TRANSITION"
        )


class InvalidFeePaymentError(UserDomainException):
    """Raised when a fee payment is not positive or exceeds the outstanding fees."""

    def __init__(self, amount: int, outstanding: int):
        self.amount = amount
        self.outstanding = outstanding
        super().__init__(
            message=(
                f"Invalid fee payment of {amount}: "
                f"must be positive and at most the outstanding {outstanding}"
            ),
            code="INVALID_FEE_PAYMENT"
        )
