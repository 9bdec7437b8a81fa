"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LoadConfig: Font face selection
- FormatConfig: Output layout settings
- LoggingConfig: Logging settings
- LogLevel: Accepted logging levels
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    FormatConfig,
    GlyphPathSettings,
    LoadConfig,
    LoggingConfig,
    LogLevel,
    get_default_settings,
)

__all__ = [
    "FormatConfig",
    "GlyphPathSettings",
    "LoadConfig",
    "LoggingConfig",
    "LogLevel",
    "get_default_settings",
]
