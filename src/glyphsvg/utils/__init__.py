"""Utility functions for glyphsvg.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from glyphsvg.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
    "get_logger",
]
