"""UserId value object."""

import re
import secrets
from dataclasses import dataclass

from library.domain.exceptions import InvalidUserIdError


USER_ID_REGEX = re.compile(r"^\d{8}$")


@dataclass(frozen=True)
class UserId:
    """
    User identifier value object.

    Immutable 8-digit token identifying a library member.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate user ID format."""
        normalized = self.value.strip() if isinstance(self.value, str) else ""

        if not USER_ID_REGEX.match(normalized):
            raise InvalidUserIdError(str(self.value))

        object.__setattr__(self, "value", normalized)

    @classmethod
    def generate(cls) -> "UserId":
        """Generate a random 8-digit user ID (never starting with zero)."""
        return cls(str(10_000_000 + secrets.randbelow(90_000_000)))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserId(value={self.value!r})"
