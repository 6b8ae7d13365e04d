"""Exception hierarchy for glyphsvg."""


class GlyphSvgError(Exception):
    """Base exception for all glyphsvg errors."""

    pass


class FontError(GlyphSvgError):
    """Errors related to font loading or font-wide data."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class MissingMetricsError(FontError):
    """Font-wide vertical metrics needed for the viewport are absent."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing font metrics: {', '.join(missing)}")


class InvalidVariationError(GlyphSvgError):
    """A variation setting could not be parsed."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(
            f"Invalid variation setting '{setting}', expected TAG=VALUE (e.g. wght=700)"
        )


class GlyphError(GlyphSvgError):
    """Errors related to glyph processing."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class MalformedContourError(GlyphError):
    """A contour's points cannot be decoded into a closed outline.

    Raised when decoding reaches a point/state combination that well-formed
    quadratic outline data never produces. Always fatal for the render.
    """

    def __init__(
        self,
        reason: str,
        glyph_name: str | None = None,
        contour_index: int | None = None,
    ) -> None:
        self.reason = reason
        self.glyph_name = glyph_name
        self.contour_index = contour_index

        location = ""
        if glyph_name is not None:
            location += f" in glyph '{glyph_name}'"
        if contour_index is not None:
            location += f" (contour {contour_index})"
        super().__init__(f"Malformed contour{location}: {reason}")

    def __reduce__(self):
        # Rebuild from fields when crossing a process boundary
        return (type(self), (self.reason, self.glyph_name, self.contour_index))


class EmptyInputWarning(UserWarning):
    """Nothing was placed; the rendered document is empty but valid."""

    pass
