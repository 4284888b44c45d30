"""Configuration loading and validation."""

from .models import (
    DEFAULT_BASE_URL,
    AppConfig,
    LoggingConfig,
    SourceConfig,
)
from .loader import ConfigError, load_app_config

__all__ = [
    "DEFAULT_BASE_URL",
    # Config models
    "AppConfig",
    "LoggingConfig",
    "SourceConfig",
    # Loaders
    "ConfigError",
    "load_app_config",
]
