"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore

from core.errors import ConfigurationError
from core.messages import ErrorMessages


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Redis Demo", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")

    # Redis connection
    redis_host: str = Field(default="localhost", alias="REDIS_HOST")
    redis_port: int = Field(default=6379, alias="REDIS_PORT")
    redis_password: str = Field(default="", alias="REDIS_PASSWORD")
    redis_db: int = Field(default=0, alias="REDIS_DB")
    # None = library default (block forever)
    redis_socket_timeout: Optional[float] = Field(
        default=None, alias="REDIS_SOCKET_TIMEOUT"
    )
    redis_socket_connect_timeout: Optional[float] = Field(
        default=None, alias="REDIS_SOCKET_CONNECT_TIMEOUT"
    )

    # Connection pool bounds
    redis_max_idle: int = Field(default=80, alias="REDIS_MAX_IDLE")
    redis_max_active: int = Field(default=12000, alias="REDIS_MAX_ACTIVE")

    def validate_pool_bounds(self) -> bool:
        """
        Validate pool bounds: both positive, idle never above active.

        Returns:
            True if valid, raises ConfigurationError if invalid
        """
        if self.redis_max_idle <= 0 or self.redis_max_active <= 0:
            raise ConfigurationError(
                ErrorMessages.POOL_BOUNDS_NOT_POSITIVE.format(
                    max_idle=self.redis_max_idle, max_active=self.redis_max_active
                )
            )
        if self.redis_max_idle > self.redis_max_active:
            raise ConfigurationError(
                ErrorMessages.POOL_IDLE_ABOVE_ACTIVE.format(
                    max_idle=self.redis_max_idle, max_active=self.redis_max_active
                )
            )
        return True

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Log format: "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    # Enable/disable file logging (logs/app.log and logs/error.log)
    log_file_enabled: bool = Field(default=False, alias="LOG_FILE_ENABLED")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
