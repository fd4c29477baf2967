# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Configuration for the specforge logging system.

Settings are read from ``SPECFORGE_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from specforge.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Configuration settings for the specforge logging system."""

    model_config = SettingsConfigDict(
        env_prefix="SPECFORGE_LOGGING_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    level: str = Field(default=LogLevel.WARNING.value, description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    include_level: bool = Field(default=True, description="Include log level in logs")
    console_enabled: bool = Field(default=True, description="Enable console logging")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate that the level is a valid log level."""
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
