"""Reservation SQLAlchemy model."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from library.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base


class ReservationModel(Base):
    """
    Reservation SQLAlchemy model.

    Pure SQLAlchemy with no business logic. Business logic lives in
    domain.entities.reservation.Reservation.

    Attributes:
        id: Reservation identifier (``RES`` + 10 digits)
        user_id: 8-digit user identifier
        book_id: 10-character book identifier
        status: Lifecycle status (active, ready, fulfilled, expired, cancelled)
        created_at: When the user joined the queue (FIFO ordering key)
        ready_at: When the book was held for the user
        expires_at: End of the hold period

    Indexes:
        (book_id, status): queue lookups and READY holders per book
        (user_id, book_id): duplicate prevention
        (status): expiration sweeps
    """

    __tablename__ = "reservations"

    id: Mapped[str] = mapped_column(String(13), primary_key=True)

    user_id: Mapped[str] = mapped_column(String(8), nullable=False)

    book_id: Mapped[str] = mapped_column(String(10), nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    ready_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    expires_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_reservations_book_id_status", "book_id", "status"),
        Index("ix_reservations_user_id_book_id", "user_id", "book_id"),
    )

    def __repr__(self) -> str:
        """String representation of ReservationModel."""
        return (
            f"ReservationModel(id={self.id}, user_id={self.user_id}, "
            f"book_id={self.book_id}, status={self.status})"
        )
