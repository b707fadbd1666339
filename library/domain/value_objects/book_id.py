"""BookId value object."""

import re
import secrets
import string
from dataclasses import dataclass

from library.domain.exceptions import InvalidBookIdError


BOOK_ID_REGEX = re.compile(r"^[A-Z0-9]{10}$")
ALPHABET = string.ascii_uppercase + string.digits
LENGTH = 10


@dataclass(frozen=True)
class BookId:
    """
    Book identifier value object.

    Immutable 10-character alphanumeric token, normalized to uppercase.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate book ID format and normalize."""
        normalized = self.value.strip().upper() if isinstance(self.value, str) else ""

        if not BOOK_ID_REGEX.match(normalized):
            raise InvalidBookIdError(str(self.value))

        object.__setattr__(self, "value", normalized)

    @classmethod
    def generate(cls) -> "BookId":
        """Generate a random book ID."""
        return cls("".join(secrets.choice(ALPHABET) for _ in range(LENGTH)))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"BookId(value={self.value!r})"
