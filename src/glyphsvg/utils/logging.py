"""Logging utilities for glyphsvg."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from one render."""

    placed_count: int = 0
    defined_count: int = 0
    reused_count: int = 0
    empty_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphsvg")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get the package logger without reconfiguring structlog."""
    return structlog.get_logger("glyphsvg")


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = RenderStats()

    def log_glyph_defined(
        self,
        glyph_id: str,
        contour_count: int,
        command_count: int,
    ) -> None:
        """Log a glyph outline emitted for the first time."""
        self._logger.debug(
            "Glyph defined",
            glyph=glyph_id,
            contours=contour_count,
            commands=command_count,
        )
        self._stats.defined_count += 1
        if contour_count == 0:
            self._stats.empty_count += 1

    def log_glyph_placed(self, glyph_id: str, x: float, y: float, reused: bool) -> None:
        """Log a placement reference."""
        if reused:
            self._logger.debug("Glyph reused", glyph=glyph_id, x=x, y=y)
            self._stats.reused_count += 1
        self._stats.placed_count += 1

    def log_glyph_error(self, glyph_id: str | None, error: Exception) -> None:
        """Log a decode failure that aborts the render."""
        self._logger.error(
            "Glyph decoding failed",
            glyph=glyph_id,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_empty_input(self, testcase: str | None) -> None:
        """Log a render with nothing to place."""
        self._logger.warning("No glyphs to place", testcase=testcase)

    def log_render_complete(self, testcase: str | None) -> None:
        """Log render summary."""
        self._logger.info(
            "Render complete",
            testcase=testcase,
            placed=self._stats.placed_count,
            defined=self._stats.defined_count,
            reused=self._stats.reused_count,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
