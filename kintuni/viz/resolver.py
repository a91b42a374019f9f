"""Symbol-name to glyph dispatch for the chart paper."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional

from kintuni.config.settings import ChartSettings

from .core.glyphs import Glyph, GlyphCatalog, default_catalog
from .core.svg import SvgElement
from .core.symbols import SymbolKey

if TYPE_CHECKING:  # pragma: no cover
    from .paper import ChartPaper

LOG = logging.getLogger(__name__)

SymbolOverride = Callable[[str, float, float, "ChartPaper"], Optional[SvgElement]]

PLACEHOLDER_RADIUS = 8
PLACEHOLDER_STROKE = "#ffff00"
PLACEHOLDER_FILL = "#ff0000"


class SymbolResolver:
    """Resolve caller-facing symbol names to drawn glyph groups.

    Resolution is a two step pipeline: the optional override runs first and
    wins whenever it returns an element; otherwise the name is looked up in
    a dispatch table built from ``settings.symbol_names``.  Names missing
    from the table yield a placeholder marker instead of an error.
    """

    def __init__(
        self,
        settings: ChartSettings,
        catalog: GlyphCatalog | None = None,
        override: SymbolOverride | None = None,
    ) -> None:
        self.settings = settings
        self.catalog = catalog or default_catalog()
        self.override = override if override is not None else settings.custom_symbol_fn
        self._table: Dict[str, Glyph] = {
            settings.symbol_names[key.value]: self.catalog.get(key)
            for key in SymbolKey
            if key in self.catalog
        }

    def glyph_for(self, name: str) -> Glyph | None:
        return self._table.get(name)

    def names(self) -> list[str]:
        return list(self._table)

    def resolve(self, name: str, x: float, y: float, paper: "ChartPaper") -> SvgElement:
        if self.override is not None:
            symbol = self.override(name, x, y, paper)
            if symbol is not None:
                return symbol
        glyph = self._table.get(name)
        if glyph is None:
            LOG.debug("Unknown chart symbol %r at (%s, %s); drawing placeholder", name, x, y)
            return self.placeholder(x, y, paper)
        return paper.draw_glyph(glyph, x, y)

    @staticmethod
    def placeholder(x: float, y: float, paper: "ChartPaper") -> SvgElement:
        marker = paper.circle(x, y, PLACEHOLDER_RADIUS)
        marker.set(stroke=PLACEHOLDER_STROKE, stroke_width=1, fill=PLACEHOLDER_FILL)
        return SvgElement("g").add(marker)


__all__ = [
    "SymbolResolver",
    "SymbolOverride",
    "PLACEHOLDER_RADIUS",
    "PLACEHOLDER_STROKE",
    "PLACEHOLDER_FILL",
]
