"""Configuration management for audiomark.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SymbolConfig: Symbol size, spacing and stroke settings
- ShapeConfig: Outline settings for input boxes
- TextConfig: Caption and symbol fonts
- PageConfig: Page geometry
- LoggingConfig: Logging settings
- AudiomarkSettings: Main application settings
"""

from audiomark.config.settings import (
    AudiomarkSettings,
    LoggingConfig,
    PageConfig,
    ShapeConfig,
    SymbolConfig,
    TextConfig,
    get_default_settings,
)

__all__ = [
    "AudiomarkSettings",
    "LoggingConfig",
    "PageConfig",
    "ShapeConfig",
    "SymbolConfig",
    "TextConfig",
    "get_default_settings",
]
