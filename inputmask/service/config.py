# inputmask/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inputmask.logging_config import LOG_FORMATS


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'INPUTMASK_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="INPUTMASK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_template: str = Field(
        default="",
        description="Mask template used when a caller does not supply one.",
    )

    tokens_file: Optional[Path] = Field(
        default=None,
        description="Alternative YAML file defining the token alphabet.",
    )

    log_level: str = Field(
        default="INFO", description="Logging level for configure_logging()."
    )

    log_format: str = Field(
        default="json", description="Log output format: 'json' or 'plain'."
    )

    @field_validator("tokens_file")
    @classmethod
    def validate_tokens_file(cls, v: Optional[Path]) -> Optional[Path]:
        """Ensure a configured tokens file exists."""
        if v is not None and not v.is_file():
            raise ValueError(f"Tokens file does not exist: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure the format is one configure_logging() supports."""
        fmt = v.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Unknown log format: {v}")
        return fmt


# Singleton settings instance
settings = Settings()
