"""Background scheduling."""

from library.infrastructure.scheduling.expiration_sweeper import ExpirationSweeper

__all__ = ["ExpirationSweeper"]
