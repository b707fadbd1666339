"""Domain event handlers."""

from library.application.handlers.book_available_handler import BookAvailableHandler

__all__ = ["BookAvailableHandler"]
