"""Utility functions for regionizer.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics
"""

from regionizer.utils.logging import (
    ArrangementStats,
    PipelineLogger,
    configure_logging,
)

__all__ = [
    "ArrangementStats",
    "PipelineLogger",
    "configure_logging",
]
