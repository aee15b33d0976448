"""Configuration loading for the Gilded Rose inventory.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Run mode
    run_mode: Literal["simulate", "cli"] = Field(
        default="simulate",
        description="Run mode",
    )
    days: int = Field(
        default=2,
        description="Number of days to simulate in simulate mode",
    )

    # Inventory configuration
    inventory_backend: Literal["fixture", "json"] = Field(
        default="fixture",
        description="Inventory source type",
    )
    inventory_path: str = Field(
        default="./inventory.json",
        description="Path to the JSON inventory file",
    )

    # Report configuration
    report_backend: Literal["stdout", "markdown"] = Field(
        default="stdout",
        description="Report backend type",
    )
    report_output_dir: str = Field(
        default="./reports",
        description="Output directory for markdown reports",
    )

    # Business rules
    conjured_decay_rate: int = Field(
        default=2,
        description="Quality lost per day by conjured items before the sell date",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: int) -> int:
        """Ensure the number of days is not negative."""
        if v < 0:
            raise ValueError("days must be non-negative")
        return v

    @field_validator("conjured_decay_rate")
    @classmethod
    def validate_conjured_decay_rate(cls, v: int) -> int:
        """Ensure conjured items actually degrade."""
        if v < 1:
            raise ValueError("conjured_decay_rate must be at least 1")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
