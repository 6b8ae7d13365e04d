"""SVG writer for render documents.

This module provides the SvgWriter class for serializing a RenderDocument
into the symbol/use SVG layout used for conformance comparison.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from glyphsvg.core.normalizer import (
    DEFAULT_CLOSE_TOLERANCE,
    format_number,
    to_path_data,
)
from glyphsvg.domain import RenderDocument, Viewport

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
FLIP_Y_TRANSFORM = "matrix(1,0,0,-1,0,0)"

_INDENT = "\n  "


class SvgWriter:
    """Writes a render document as SVG.

    Symbols are emitted in first-seen order, followed by placements in call
    order, one element per line.

    Example:
        writer = SvgWriter(document, viewport, testcase="SHARAN-1")
        writer.save(Path("SHARAN-1.svg"))
    """

    def __init__(
        self,
        document: RenderDocument,
        viewport: Viewport,
        testcase: str,
        flip_y: bool = False,
        tolerance: float = DEFAULT_CLOSE_TOLERANCE,
    ) -> None:
        """Initialize the SVG writer.

        Args:
            document: Document to serialize
            viewport: Viewport for the ``viewBox`` attribute
            testcase: Prefix for symbol identifiers
            flip_y: Add a y-flipping transform to every ``<use>``
            tolerance: Degenerate-close tolerance for the path data
        """
        self._document = document
        self._viewport = viewport
        self._testcase = testcase
        self._flip_y = flip_y
        self._tolerance = tolerance

    def symbol_id(self, glyph_id: str) -> str:
        """Document-wide identifier of a glyph's symbol."""
        return f"{self._testcase}.{glyph_id}"

    def build(self) -> ET.Element:
        """Build the SVG element tree."""
        root = ET.Element(
            "svg",
            {
                "version": "1.1",
                "xmlns": SVG_NS,
                "xmlns:xlink": XLINK_NS,
                "viewBox": self._viewport.to_view_box(),
            },
        )

        for glyph_id, outline in self._document.definitions.items():
            symbol = ET.SubElement(
                root,
                "symbol",
                {"id": self.symbol_id(glyph_id), "overflow": "visible"},
            )
            ET.SubElement(
                symbol,
                "path",
                {"d": to_path_data(outline.commands, self._tolerance)},
            )

        for placement in self._document.placements:
            attrs = {
                "xlink:href": f"#{self.symbol_id(placement.glyph_id)}",
                "x": format_number(placement.x),
                "y": format_number(placement.y),
            }
            if self._flip_y:
                attrs["transform"] = FLIP_Y_TRANSFORM
            ET.SubElement(root, "use", attrs)

        children = list(root)
        root.text = _INDENT if children else "\n"
        for child in children:
            child.tail = _INDENT
        if children:
            children[-1].tail = "\n"

        return root

    def to_string(self) -> str:
        """Serialize the document to an SVG string ending with a newline."""
        return ET.tostring(self.build(), encoding="unicode") + "\n"

    def save(self, output_path: Path) -> None:
        """Write the SVG to a file.

        Raises:
            OSError: If file cannot be written
        """
        output_path.write_text(self.to_string(), encoding="utf-8")
