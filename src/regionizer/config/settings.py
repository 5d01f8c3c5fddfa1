"""Configuration settings for Regionizer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Region file format."""

    TEXT = "text"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ArrangementConfig(BaseModel):
    """Configuration for arrangement construction."""

    include_silhouette_edges: bool = Field(
        default=True,
        description="Add every silhouette polygon edge to the skeleton before building",
    )
    check_cycle_area: bool = Field(
        default=True,
        description="Check that traced face cycles have a total area of zero",
    )


class OutputConfig(BaseModel):
    """Configuration for writing results."""

    format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="Region file format",
    )
    json_indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation of JSON output (None for a single line)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class RegionizerSettings(BaseModel):
    """Main application settings."""

    arrangement: ArrangementConfig = Field(default_factory=ArrangementConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RegionizerSettings:
    """Get default application settings."""
    return RegionizerSettings()
