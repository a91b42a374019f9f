"""Core rendering primitives used by the chart renderer."""

from .glyphs import Glyph, GlyphCatalog, GlyphPart, default_catalog
from .labeler import Labeler, LabelPlacement, LabelRequest
from .svg import SvgDocument, SvgElement
from .symbols import SymbolCategory, SymbolKey

__all__ = [
    "SvgDocument",
    "SvgElement",
    "Glyph",
    "GlyphPart",
    "GlyphCatalog",
    "default_catalog",
    "LabelRequest",
    "LabelPlacement",
    "Labeler",
    "SymbolCategory",
    "SymbolKey",
]
