"""Utility functions for audiomark.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics collection
"""

from audiomark.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
