"""
Application settings configuration for the Notification API.

Centralized settings loaded from environment variables (and an optional
.env file in the working directory).
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment Variables:
        NOTIFY_DB_URL: SQLAlchemy database URL (default: local SQLite file)
        NOTIFY_ENV: Environment name (development, production, test)
        NOTIFY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        NOTIFY_LOG_DIR: Directory for rotating JSON log files in production
        NOTIFY_CORS_ORIGINS: Comma-separated list of allowed CORS origins
    """

    database_url: str = Field(
        default="sqlite:///./notifications.db",
        validation_alias="NOTIFY_DB_URL",
        description="SQLAlchemy database URL"
    )

    environment: str = Field(
        default="development",
        validation_alias="NOTIFY_ENV",
        description="Runtime environment (development, production, test)"
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="NOTIFY_LOG_LEVEL",
    )

    log_dir: str = Field(
        default="logs",
        validation_alias="NOTIFY_LOG_DIR",
        description="Log directory used when running in production"
    )

    # Frontend dev servers by default
    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias="NOTIFY_CORS_ORIGINS",
    )

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Normalize and validate the environment name."""
        v = v.strip().lower()
        if v not in ("development", "production", "test"):
            raise ValueError("NOTIFY_ENV must be one of: development, production, test")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to upper case."""
        return v.strip().upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Get allowed CORS origins as a list.

        Returns:
            List of origin strings (e.g., ["http://localhost:3000"])
        """
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings instance.

    Returns:
        AppSettings: Configured application settings from environment
    """
    return AppSettings()
