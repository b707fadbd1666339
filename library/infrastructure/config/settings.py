"""
Application configuration using Pydantic Settings.

All settings are loaded from environment variables or a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, PostgresDsn, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Library Reservation Service")
    version: str = Field(default="0.1.0")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    debug: bool = Field(default=False)

    # -------------------------------------------------------------------------
    # Server Configuration
    # -------------------------------------------------------------------------
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/library.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------
    reservation_store: Literal["memory", "postgresql"] = Field(default="memory")
    database_url: Optional[PostgresDsn] = Field(
        default=None,
        description="PostgreSQL connection string with asyncpg driver",
    )
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5, ge=1, le=50)
    db_max_overflow: int = Field(default=10, ge=0, le=100)

    # -------------------------------------------------------------------------
    # Reservation Expiration
    # -------------------------------------------------------------------------
    expiration_sweep_enabled: bool = Field(default=True)
    expiration_sweep_interval_seconds: float = Field(default=60.0, gt=0)

    @model_validator(mode="after")
    def require_database_url(self) -> "Settings":
        """Ensure a database URL is configured when PostgreSQL is selected."""
        if self.reservation_store == "postgresql" and self.database_url is None:
            raise ValueError("database_url is required when reservation_store is 'postgresql'")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def database_url_str(self) -> str:
        """Get database URL as string."""
        return str(self.database_url) if self.database_url else ""


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
