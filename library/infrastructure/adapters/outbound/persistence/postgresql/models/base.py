"""
Base model class for all database models.

This module provides the declarative base and common model configuration.
All SQLAlchemy models should inherit from Base.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Naming convention for constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    Base class for all database models.

    Domain identifiers are formatted strings (e.g. ``RES0123456789``), so
    each model declares its own string primary key.

    Usage:
        class ReservationModel(Base):
            __tablename__ = "reservations"
            id: Mapped[str] = mapped_column(String(13), primary_key=True)
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    def __repr__(self) -> str:
        """
        String representation of model instance.

        Returns:
            String in format: ModelName(id=...)
        """
        return f"{self.__class__.__name__}(id={getattr(self, 'id', None)})"
