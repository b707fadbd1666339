"""
Infrastructure layer configuration.

This package contains:
- Application settings (pydantic-settings)
- Logging configuration
- Database connection and session management
- The composition root
"""

from library.infrastructure.config.container import Container
from library.infrastructure.config.database import DatabaseConfig
from library.infrastructure.config.settings import Settings, get_settings

__all__ = [
    "Container",
    "DatabaseConfig",
    "Settings",
    "get_settings",
]
