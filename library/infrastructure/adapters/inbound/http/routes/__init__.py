"""HTTP API routers."""

from library.infrastructure.adapters.inbound.http.routes import books, health, reservations, users

__all__ = ["books", "health", "reservations", "users"]
