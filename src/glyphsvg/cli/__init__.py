"""Command-line interface for glyphsvg.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render a text run to an SVG file or stdout
- Variation axis and OpenType feature settings
- Verbose/quiet output modes
- Detailed error reporting
"""

from glyphsvg.cli.app import cli, main

__all__ = ["cli", "main"]
