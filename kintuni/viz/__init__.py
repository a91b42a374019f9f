"""Visualization primitives for KintuniAI.

This package hosts the SVG-first zodiac chart renderer: the glyph
catalog, the chart paper that positions glyphs, and the radix layout
that assembles a complete wheel.  Outputs are deterministic so they can
be cached and compared byte for byte.

The paper and radix modules depend on :mod:`kintuni.config`; import them
directly (``from kintuni.viz.paper import ChartPaper``).
"""

from .core.glyphs import Glyph, GlyphCatalog
from .core.labeler import LabelPlacement, LabelRequest, Labeler
from .core.svg import SvgDocument, SvgElement

__all__ = [
    "SvgDocument",
    "SvgElement",
    "Glyph",
    "GlyphCatalog",
    "LabelRequest",
    "LabelPlacement",
    "Labeler",
]
