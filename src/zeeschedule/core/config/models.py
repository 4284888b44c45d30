"""
Pydantic configuration models for zeeschedule.

These models provide type-safe configuration with validation for:
- The schedule source (base URL, HTTP client settings)
- Logging
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


DEFAULT_BASE_URL = "http://www.zeetv.com/schedule/"


# =============================================================================
# Source Configuration
# =============================================================================


class SourceConfig(BaseModel):
    """Where and how the schedule page is fetched."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Schedule page URL; the date is appended as ?sdate=YYYY-MM-DD",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="HTTP request timeout in seconds",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom User-Agent header (default: a common desktop browser)",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Only HTTP/HTTPS schedule pages are supported."""
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError(f"base_url must be HTTP/HTTPS: {value}")
        return value


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    json_format: bool = Field(
        default=True,
        description="Use JSON format for file logs",
    )
    rich_console: bool = Field(
        default=True,
        description="Use Rich for console output",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        normalized = value.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized


# =============================================================================
# Application Configuration
# =============================================================================


class AppConfig(BaseModel):
    """Root application configuration, loaded from app.yaml."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
