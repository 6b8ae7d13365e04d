"""glyphsvg - Render TrueType outlines as comparable SVG documents.

glyphsvg shapes a run of text with a TrueType font and emits an SVG document
in which every distinct glyph outline is defined once as a ``<symbol>`` and
placed with ``<use>`` references. The path data is reconstructed from the
font's on-curve/off-curve point encoding and normalized so that documents can
be diffed byte-for-byte against a reference renderer.

Example:
    $ glyphsvg NotoSans-Regular.ttf "Hello" --testcase HELLO-1 -o HELLO-1.svg
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
