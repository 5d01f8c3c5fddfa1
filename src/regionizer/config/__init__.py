"""Configuration management for regionizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ArrangementConfig: Arrangement construction settings
- OutputConfig: Region file settings
- LoggingConfig: Logging settings (levels as LogLevel)
- RegionizerSettings: Main application settings
"""

from regionizer.config.settings import (
    ArrangementConfig,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    RegionizerSettings,
    get_default_settings,
)

__all__ = [
    "ArrangementConfig",
    "LoggingConfig",
    "LogLevel",
    "OutputConfig",
    "OutputFormat",
    "RegionizerSettings",
    "get_default_settings",
]
