"""Base domain exception classes."""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Every domain error carries a stable machine-readable ``code`` so that
    outer layers can translate it without parsing messages.
    """

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for responses and structured logs."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"
