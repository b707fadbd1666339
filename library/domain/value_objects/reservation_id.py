"""ReservationId value object."""

import re
import secrets
from dataclasses import dataclass

from library.domain.exceptions import InvalidReservationIdError


RESERVATION_ID_REGEX = re.compile(r"^RES\d{10}$")
PREFIX = "RES"
DIGITS = 10


@dataclass(frozen=True)
class ReservationId:
    """
    Reservation identifier value object.

    Immutable token in the form ``RES`` followed by 10 digits
    (e.g. ``RES0001234567``).
    """

    value: str

    def __post_init__(self) -> None:
        """Validate reservation ID format."""
        normalized = self.value.strip() if isinstance(self.value, str) else ""

        if not RESERVATION_ID_REGEX.match(normalized):
            raise InvalidReservationIdError(str(self.value))

        object.__setattr__(self, "value", normalized)

    @classmethod
    def generate(cls) -> "ReservationId":
        """Generate a new random reservation ID."""
        number = secrets.randbelow(10**DIGITS)
        return cls(f"{PREFIX}{number:0{DIGITS}d}")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ReservationId(value={self.value!r})"
