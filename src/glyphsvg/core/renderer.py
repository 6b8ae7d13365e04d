"""Render orchestration.

This module coordinates one render: shape text, place every glyph through a
fresh compositor, compute the viewport and serialize the document.

Key components:
- RenderResult: Document, viewport and statistics of one render
- OutlineRenderer: Main orchestrator class
"""

import time
import warnings
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from glyphsvg.config import GlyphSvgSettings, get_default_settings
from glyphsvg.core.compositor import (
    GlyphCompositor,
    build_outline_from_dict,
    resolve_identifier,
)
from glyphsvg.domain import (
    Contour,
    FontMetrics,
    GlyphInstance,
    GlyphOutline,
    RenderDocument,
    Viewport,
)
from glyphsvg.exceptions import (
    EmptyInputWarning,
    MalformedContourError,
    MissingMetricsError,
)
from glyphsvg.io.reader import FontReader
from glyphsvg.io.shaper import TextShaper, layout_instances
from glyphsvg.io.writer import SvgWriter
from glyphsvg.utils import RenderLogger, RenderStats, configure_logging


@dataclass
class RenderResult:
    """Outcome of one render."""

    document: RenderDocument
    viewport: Viewport
    stats: RenderStats


class OutlineRenderer:
    """Renders text runs into deduplicated SVG documents.

    Every call to ``render`` or ``render_instances`` uses its own compositor,
    so no glyph cache is shared between renders.

    Example:
        renderer = OutlineRenderer()
        result = renderer.render(Path("font.ttf"), "ABBA", testcase="T-1")
        svg = renderer.to_svg(result, testcase="T-1")
    """

    def __init__(
        self,
        settings: GlyphSvgSettings | None = None,
        configure: bool = True,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Render, processing and logging settings (defaults if None)
            configure: Configure structlog from ``settings.logging``
        """
        settings = settings if settings is not None else get_default_settings()
        self.settings = settings
        if configure:
            self.logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
                quiet=settings.logging.quiet,
            )
        else:
            self.logger = None

    def render(
        self,
        font_path: Path,
        text: str,
        testcase: str | None = None,
        variations: dict[str, float] | None = None,
        features: dict[str, bool | int] | None = None,
    ) -> RenderResult:
        """Shape and render a text run.

        Args:
            font_path: Path to a TrueType font
            text: Text to render
            testcase: Test case identifier, used for logging
            variations: Axis tag to value for variable fonts
            features: OpenType feature tag to value

        Returns:
            RenderResult with the document and viewport

        Raises:
            FontFormatError: If the font has no glyf outlines
            MissingMetricsError: If the font lacks vertical metrics
            MalformedContourError: If any glyph cannot be decoded
        """
        reader = FontReader(font_path)
        reader.load(variations=variations)

        try:
            shaper = TextShaper(font_path, variations=variations)
            shaped = shaper.shape(text, features)

            names: dict[str, str] = {}

            def identifier_for(index: int) -> str:
                name = reader.glyph_name(index)
                glyph_id = resolve_identifier(name, index)
                names[glyph_id] = name if name is not None else glyph_id
                return glyph_id

            instances = layout_instances(shaped, identifier_for)

            return self.render_instances(
                instances,
                contours_for=lambda glyph_id: reader.glyph_contours(names[glyph_id]),
                metrics=reader.metrics,
                testcase=testcase,
            )
        finally:
            reader.close()

    def render_instances(
        self,
        instances: Sequence[GlyphInstance],
        contours_for: Callable[[str], Sequence[Contour]],
        metrics: FontMetrics,
        testcase: str | None = None,
    ) -> RenderResult:
        """Render already-positioned glyph instances.

        Args:
            instances: Glyphs in reading order, positions in font units
            contours_for: Callable returning the contours of a glyph identifier
            metrics: Font-wide metrics
            testcase: Test case identifier, used for logging

        Returns:
            RenderResult with the document and viewport

        Raises:
            MissingMetricsError: If any font-wide metric is absent
            MalformedContourError: If any glyph cannot be decoded
        """
        missing = metrics.missing_fields()
        if missing:
            raise MissingMetricsError(missing)

        render_logger = RenderLogger(self.logger)
        stats = render_logger.stats
        stats.start_time = time.time()

        config = self.settings.render
        compositor = GlyphCompositor(
            contours_for=contours_for,
            scale=metrics.scale_to(config.target_upm),
            tolerance=config.close_tolerance,
            render_logger=render_logger,
        )

        if not instances:
            render_logger.log_empty_input(testcase)
            warnings.warn(
                f"No glyphs to place for test case {testcase!r}",
                EmptyInputWarning,
                stacklevel=2,
            )

        workers = self.settings.processing.max_workers
        if workers != 1 and instances:
            outlines = self._decode_parallel(
                instances, contours_for, compositor, render_logger, workers
            )
            for outline in outlines:
                compositor.define(outline)

        for instance in instances:
            compositor.place_instance(instance)

        viewport = compositor.bounds.viewport_for(metrics, config.target_upm)

        stats.end_time = time.time()
        render_logger.log_render_complete(testcase)

        return RenderResult(
            document=compositor.document,
            viewport=viewport,
            stats=stats,
        )

    def _decode_parallel(
        self,
        instances: Sequence[GlyphInstance],
        contours_for: Callable[[str], Sequence[Contour]],
        compositor: GlyphCompositor,
        render_logger: RenderLogger,
        max_workers: int | None,
    ) -> list[GlyphOutline]:
        """Decode unique glyphs in worker processes.

        ``executor.map`` yields results in submission order, so the outlines
        come back in first-seen order. A failure in any worker is logged and
        propagates.
        """
        unique_ids = list(dict.fromkeys(instance.glyph_id for instance in instances))
        contour_dicts: list[list[dict]] = [
            [contour.to_dict() for contour in contours_for(glyph_id)]
            for glyph_id in unique_ids
        ]

        config = self.settings.render
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            results = executor.map(
                build_outline_from_dict,
                unique_ids,
                contour_dicts,
                [compositor.scale] * len(unique_ids),
                [config.close_tolerance] * len(unique_ids),
            )
            try:
                return [GlyphOutline.from_dict(result) for result in results]
            except MalformedContourError as e:
                render_logger.log_glyph_error(e.glyph_name, e)
                raise

    def to_svg(self, result: RenderResult, testcase: str) -> str:
        """Serialize a render result as SVG."""
        writer = SvgWriter(
            result.document,
            result.viewport,
            testcase=testcase,
            flip_y=self.settings.render.flip_y,
            tolerance=self.settings.render.close_tolerance,
        )
        return writer.to_string()

    def write_svg(self, result: RenderResult, testcase: str, output_path: Path) -> None:
        """Serialize a render result and write it to a file."""
        output_path.write_text(self.to_svg(result, testcase), encoding="utf-8")

