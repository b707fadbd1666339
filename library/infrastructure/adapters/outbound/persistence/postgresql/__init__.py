"""PostgreSQL persistence adapters (SQLAlchemy async)."""
