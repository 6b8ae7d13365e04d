"""Configuration management for glyphsvg.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Output coordinate space and normalization settings
- ProcessingConfig: Decoding parallelism
- LoggingConfig: Logging settings
- GlyphSvgSettings: Main application settings
"""

from glyphsvg.config.settings import (
    GlyphSvgSettings,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "GlyphSvgSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "RenderConfig",
    "get_default_settings",
]
