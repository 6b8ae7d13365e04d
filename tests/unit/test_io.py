"""Unit tests for the font I/O layer.

Tests for the glyf converter, FontReader, shaping helpers and SvgWriter.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from glyphsvg.domain import (
    Close,
    GlyphOutline,
    LineTo,
    MoveTo,
    Placement,
    PointType,
    QuadCurveTo,
    RenderDocument,
    Viewport,
)
from glyphsvg.exceptions import FontFormatError, InvalidVariationError
from glyphsvg.io.converter import glyf_to_contours
from glyphsvg.io.reader import FontReader
from glyphsvg.io.shaper import (
    ShapedGlyph,
    layout_instances,
    parse_features,
    parse_variations,
)
from glyphsvg.io.writer import FLIP_Y_TRANSFORM, SvgWriter

XLINK_HREF = "xlink:href"


class TestGlyfToContours:
    """Tests for splitting glyf point data into contours."""

    def test_single_contour(self):
        contours = glyf_to_contours(
            [(0, 0), (50, 100), (100, 0)],
            end_points=[2],
            flags=[1, 0, 1],
        )

        assert len(contours) == 1
        types = [p.point_type for p in contours[0].points]
        assert types == [
            PointType.ON_CURVE,
            PointType.OFF_CURVE_QUAD,
            PointType.ON_CURVE,
        ]

    def test_multiple_contours(self):
        contours = glyf_to_contours(
            [(0, 0), (10, 0), (10, 10), (2, 2), (4, 2), (4, 4)],
            end_points=[2, 5],
            flags=[1, 1, 1, 1, 1, 1],
        )

        assert [len(c) for c in contours] == [3, 3]
        assert contours[1].points[0].to_tuple() == (2, 2)

    def test_only_bit_zero_marks_on_curve(self):
        # Other flag bits (x-short, repeat, overlap) must be ignored
        contours = glyf_to_contours([(0, 0), (5, 5)], end_points=[1], flags=[0x41, 0x02])

        assert contours[0].points[0].on_curve
        assert not contours[0].points[1].on_curve

    def test_no_contours(self):
        assert glyf_to_contours([], end_points=[], flags=[]) == []


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader.font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_metrics_before_load(self):
        """Test accessing metrics before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.metrics

    def test_glyph_contours_before_load(self):
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.glyph_contours("a")

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_rejects_cff_font(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test fonts without a glyf table are rejected."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        with pytest.raises(FontFormatError, match="glyf"):
            reader.load()

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_metrics_from_hhea(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        tables = {
            "glyf": MagicMock(),
            "head": MagicMock(unitsPerEm=2048),
            "hhea": MagicMock(ascent=1900, descent=-500),
        }
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x in tables)
        mock_font.__getitem__ = Mock(side_effect=tables.__getitem__)
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()
        metrics = reader.metrics

        assert metrics.units_per_em == 2048
        assert metrics.ascender == 1900
        assert metrics.descender == -500

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_metrics_without_hhea(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        tables = {"glyf": MagicMock(), "head": MagicMock(unitsPerEm=1000)}
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x in tables)
        mock_font.__getitem__ = Mock(side_effect=tables.__getitem__)
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.metrics.missing_fields() == ["ascender", "descender"]

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_glyph_name(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "glyf")
        mock_font.getGlyphOrder.return_value = [".notdef", "a", "b"]
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.glyph_name(1) == "a"
        assert reader.glyph_name(3) is None
        assert reader.glyph_count == 3

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_static(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for static TrueType fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "glyf")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.format == "TrueType"

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_variable(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for variable TrueType fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x in {"glyf", "fvar"})
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.format == "TrueType (variable)"

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_variations_ignored_for_static_font(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "glyf")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        with patch("glyphsvg.io.reader.instancer") as mock_instancer:
            reader.load(variations={"wght": 700})

        mock_instancer.instantiateVariableFont.assert_not_called()
        assert reader._font is mock_font

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_variations_instance_variable_font(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        fvar = MagicMock()
        fvar.axes = [MagicMock(axisTag="wght"), MagicMock(axisTag="wdth")]
        tables = {"glyf": MagicMock(), "fvar": fvar}
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x in tables)
        mock_font.__getitem__ = Mock(side_effect=tables.__getitem__)
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        with patch("glyphsvg.io.reader.instancer") as mock_instancer:
            instanced = MagicMock()
            mock_instancer.instantiateVariableFont.return_value = instanced
            reader.load(variations={"wght": 700, "opsz": 12})

        mock_instancer.instantiateVariableFont.assert_called_once_with(
            mock_font, {"wght": 700}
        )
        assert reader._font is instanced

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test FontReader as context manager."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "glyf")
        mock_ttfont.return_value = mock_font

        with FontReader(Path("test.ttf")) as reader:
            assert reader._font is not None

        mock_font.close.assert_called_once()


class TestParseSettings:
    """Tests for variation and feature parsing."""

    def test_parse_variations(self):
        assert parse_variations(["wght=700", "wdth=75.5"]) == {
            "wght": 700.0,
            "wdth": 75.5,
        }

    @pytest.mark.parametrize("setting", ["wght", "=700", "wght=bold", "toolong=1"])
    def test_parse_variations_invalid(self, setting):
        with pytest.raises(InvalidVariationError):
            parse_variations([setting])

    def test_parse_features(self):
        assert parse_features(["kern", "-liga", "+calt", "salt=2"]) == {
            "kern": True,
            "liga": False,
            "calt": True,
            "salt": 2,
        }

    def test_parse_features_bad_value(self):
        with pytest.raises(ValueError):
            parse_features(["salt=x"])


class TestLayoutInstances:
    """Tests for turning shaped runs into glyph instances."""

    def test_pen_advances(self):
        shaped = [ShapedGlyph(1, 500), ShapedGlyph(2, 600), ShapedGlyph(1, 500)]
        names = {1: "a", 2: "b"}

        instances = layout_instances(shaped, names.__getitem__)

        assert [(i.glyph_id, i.origin_x) for i in instances] == [
            ("a", 0),
            ("b", 500),
            ("a", 1100),
        ]
        assert [i.advance_width for i in instances] == [500, 600, 500]

    def test_offsets_shift_origin_not_pen(self):
        shaped = [
            ShapedGlyph(1, 500),
            ShapedGlyph(3, 0, x_offset=-250, y_offset=40),
            ShapedGlyph(2, 600),
        ]

        instances = layout_instances(shaped, lambda index: f"g{index}")

        assert (instances[1].origin_x, instances[1].origin_y) == (250, 40)
        assert instances[2].origin_x == 500

    def test_empty_run(self):
        assert layout_instances([], str) == []


def _document() -> RenderDocument:
    document = RenderDocument()
    document.definitions["a"] = GlyphOutline(
        "a", [[MoveTo(0, 0), QuadCurveTo(50, 100, 100, 0), Close()]]
    )
    document.definitions["b"] = GlyphOutline(
        "b", [[MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), LineTo(0.5, 0), Close()]]
    )
    document.placements.extend(
        [Placement("a", 0, 0), Placement("b", 100, 0), Placement("a", 250.5, -12)]
    )
    return document


class TestSvgWriter:
    """Tests for SvgWriter class."""

    def test_symbol_id(self):
        writer = SvgWriter(RenderDocument(), Viewport(0, 0, 0, 0), testcase="SHARAN-1")
        assert writer.symbol_id("uni0936") == "SHARAN-1.uni0936"

    def test_root_attributes(self):
        writer = SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T")
        root = writer.build()

        assert root.tag == "svg"
        assert root.get("version") == "1.1"
        assert root.get("viewBox") == "0 -200 350 1000"

    def test_symbols_then_uses(self):
        root = SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T").build()

        assert [child.tag for child in root] == ["symbol", "symbol", "use", "use", "use"]
        assert [s.get("id") for s in root.findall("symbol")] == ["T.a", "T.b"]
        assert [u.get(XLINK_HREF) for u in root.findall("use")] == ["#T.a", "#T.b", "#T.a"]

    def test_path_data_normalized(self):
        root = SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T").build()
        paths = [s.find("path").get("d") for s in root.findall("symbol")]

        assert paths[0] == "M0 0 Q50 100 100 0 Z"
        # Closing line back to the start is dropped
        assert paths[1] == "M0 0 L10 0 L10 10 Z"

    def test_use_positions(self):
        root = SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T").build()
        uses = root.findall("use")

        assert (uses[2].get("x"), uses[2].get("y")) == ("250.5", "-12")
        assert all(u.get("transform") is None for u in uses)

    def test_flip_y(self):
        root = SvgWriter(
            _document(), Viewport(0, -200, 350, 1000), testcase="T", flip_y=True
        ).build()

        assert all(u.get("transform") == FLIP_Y_TRANSFORM for u in root.findall("use"))

    def test_empty_document(self):
        text = SvgWriter(RenderDocument(), Viewport(0, -200, 0, 1000), testcase="T").to_string()
        root = ET.fromstring(text)

        assert list(root) == []
        assert root.get("viewBox") == "0 -200 0 1000"

    def test_to_string_one_element_per_line(self):
        text = SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T").to_string()
        lines = text.splitlines()

        assert lines[0].startswith("<svg ")
        assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in lines[0]
        assert lines[1].strip().startswith('<symbol id="T.a"')
        assert lines[-1] == "</svg>"
        assert text.endswith("\n")
        assert len(lines) == 7

    def test_save(self, tmp_path):
        output = tmp_path / "out.svg"
        SvgWriter(_document(), Viewport(0, -200, 350, 1000), testcase="T").save(output)

        assert output.read_text(encoding="utf-8").count("<use ") == 3
