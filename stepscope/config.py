"""Configuration loading for the stepscope reporting adapter.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to link base URLs, the results directory and logging
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Adapter configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Link base URLs
    issue_tracker_url: str = Field(
        default="",
        description="Base URL that issue ids are appended to (e.g. https://jira/browse/)",
    )
    tms_url: str = Field(
        default="",
        description="Base URL that test-management case ids are appended to",
    )

    # Attachment storage
    results_dir: str = Field(
        default="./allure-results",
        description="Directory that receives attachment files",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("results_dir")
    @classmethod
    def validate_results_dir(cls, v: str) -> str:
        """Ensure the results directory is set."""
        if not v or not v.strip():
            raise ValueError("results_dir must be a non-empty path")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load adapter settings from environment.

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
