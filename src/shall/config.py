"""Configuration management for Shall.

Uses pydantic-settings to load defaults from environment variables
and .env files. Command-line flags override these values.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Shall configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    verbose: bool = Field(default=False)

    # Output
    output_format: Literal["table", "json"] = Field(default="table")
    label_width: int = Field(default=8, ge=1)
    subject_placeholder: str = Field(default="-")
    unknown_name: str = Field(
        default="unknown",
        description="Subject used when a file name is not valid UTF-8",
    )

    # Directory mode
    sort_directory: bool = Field(
        default=True,
        description="Process directory entries in name order",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
