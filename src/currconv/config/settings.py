# src/currconv/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation and an optional .env file.

The amount range and the currency whitelist are business rules defined in
currconv.application.converter and are not configurable.

Files that USE this module:
- currconv.app (loads settings for rates file and logging configuration)

Files that this module USES:
- currconv.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from currconv.shared.validators import validate_log_level  # Validate logging level names


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Rate data ---
    # None means the snapshot bundled with the package
    rates_file: Optional[Path] = Field(default=None, alias="RATES_FILE")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_console: bool = Field(default=True, alias="CURRCONV_LOG_CONSOLE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1024)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalise logging level name."""
        if not validate_log_level(v):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return v.upper()


# Global settings instance
settings = Settings()
