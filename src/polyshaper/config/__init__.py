"""Configuration management for polyshaper.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ClipperConfig: Quantization and fill rule settings for boolean operations
- LoggingConfig: Logging settings
- PolyshaperSettings: Main application settings
"""

from polyshaper.config.settings import (
    ClipperConfig,
    LoggingConfig,
    PolyshaperSettings,
    get_default_settings,
)

__all__ = [
    "ClipperConfig",
    "LoggingConfig",
    "PolyshaperSettings",
    "get_default_settings",
]
