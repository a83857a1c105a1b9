"""
Configuration management using pydantic-settings.

Settings are read from ORGANISATIONSNUMMER_* environment variables or a .env file.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(value: str) -> str:
    """Upper-case a logging level name, raising ValueError if it is unknown."""
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORGANISATIONSNUMMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    # Shared test vectors for organisationsnummer implementations
    testdata_url: str = Field(
        default="https://raw.githubusercontent.com/organisationsnummer/meta/main/testdata/list.json",
        description="URL of the organisationsnummer test data list",
    )
    testdata_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds when fetching test data",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        return normalize_log_level(v)


# Global settings instance
settings = Settings()
