"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default, so importing the library never requires setup

Usage:
    from errkit.core.config import get_settings

    settings = get_settings()
    if settings.translate_errors:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errkit.core.constants import DEFAULT_LOCALE
from errkit.core.enums import Environment


class Settings(BaseSettings):
    """
    Error subsystem settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (DEBUG level logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Localization
    translate_errors: bool = Field(
        default=True,
        description="Master switch for translating error messages",
    )
    locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Active locale used for error message lookups",
    )
    default_locale: str = Field(
        default=DEFAULT_LOCALE,
        description="Locale consulted when the active locale has no translation",
    )

    # Diagnostics
    document_root: str | None = Field(
        default=None,
        description="Prefix stripped from source file paths in serialized errors. "
        "When unset, the DOCUMENT_ROOT environment variable is consulted.",
    )

    model_config = SettingsConfigDict(
        env_prefix="ERRKIT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("locale", "default_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """
        Reject blank locale codes.

        Args:
            v: Locale code (e.g. 'en', 'de').

        Returns:
            str: Stripped locale code.

        Raises:
            ValueError: If the locale is empty or whitespace.
        """
        locale = v.strip()
        if not locale:
            raise ValueError("locale must not be empty")
        return locale

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def effective_log_level(self) -> str:
        """
        Log level after applying the debug switch.

        Returns:
            str: 'DEBUG' when debug is enabled, otherwise log_level.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
