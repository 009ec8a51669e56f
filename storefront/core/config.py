"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Defaults target local development with an in-memory SQLite database

Usage:
    from storefront.core.config import get_settings

    settings = get_settings()
    db_url = settings.database_url

    if settings.is_testing:
        # Test-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.core.enums import Environment, HandlerFailurePolicy

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Application metadata
    app_name: str = Field(
        default="Storefront",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (CI/testing) instead of colored console output",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        description="Database connection URL (e.g., sqlite+aiosqlite:///storefront.db)",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL queries (useful for debugging)",
    )

    # Domain events
    event_failure_policy: HandlerFailurePolicy = Field(
        default=HandlerFailurePolicy.FAIL_FAST,
        description="Dispatcher behavior when a handler raises (fail_fast, isolate)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If level is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return normalized

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.
    Tests call get_settings.cache_clear() after patching the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
