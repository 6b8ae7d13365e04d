"""Configuration settings for glyphsvg."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Configuration for outline rendering.

    Tolerances are given in normalized units, i.e. on the ``target_upm`` grid.
    """

    target_upm: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Units per em of the normalized output coordinate space",
    )
    close_tolerance: float = Field(
        default=1.0,
        ge=0.0,
        le=10.0,
        description="Max distance to the contour start for dropping a closing line",
    )
    flip_y: bool = Field(
        default=False,
        description="Add a y-flipping transform to every placement",
    )


class ProcessingConfig(BaseModel):
    """Configuration for glyph decoding."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Worker processes for decoding unique glyphs (1 = serial, None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output",
    )


class GlyphSvgSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphSvgSettings:
    """Get default application settings."""
    return GlyphSvgSettings()
