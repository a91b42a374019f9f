"""Chart drawing surface.

:class:`ChartPaper` mounts an ``<svg>`` element into a host container and
turns symbol names into positioned glyph groups.  Every glyph shares the
same placement routine (:meth:`ChartPaper.draw_glyph`); only the data in
the glyph catalog differs between symbols.
"""
from __future__ import annotations

import logging
from typing import Union

from kintuni.config.settings import ChartSettings

from .core.geometry import fmt, scale_transform, segment_path
from .core.glyphs import Glyph, GlyphCatalog, default_catalog
from .core.svg import SvgDocument, SvgElement
from .core.symbols import SymbolCategory
from .resolver import SymbolOverride, SymbolResolver

LOG = logging.getLogger(__name__)

CLICK_AREA_SIZE = "20px"

Host = Union[SvgElement, SvgDocument]


class RootElementNotFound(LookupError):
    """Raised when the host has no container carrying the requested id."""


class ChartPaper:
    """SVG surface a chart is drawn on.

    ``host`` is searched for the element whose id is ``element_id``; the
    paper's ``<svg>`` is appended to it and a wrapper group
    ``{element_id}-{settings.id_chart}`` becomes :attr:`root`.
    """

    def __init__(
        self,
        host: Host,
        element_id: str,
        width: float,
        height: float,
        settings: ChartSettings | None = None,
        catalog: GlyphCatalog | None = None,
        *,
        symbol_override: SymbolOverride | None = None,
    ) -> None:
        container = host.find_by_id(element_id)
        if container is None:
            raise RootElementNotFound(f"Root element '{element_id}' not found")

        self.settings = settings or ChartSettings()
        self.catalog = catalog or default_catalog()
        self.width = width
        self.height = height
        self.host = host
        self.container = container
        self.element_id = element_id
        self.paper_id = f"{element_id}-{self.settings.id_chart}"

        self.document = SvgDocument(width, height)
        self.svg = self.document.root
        self.root = SvgElement("g").set(id=self.paper_id)
        self.svg.add(self.root)
        container.add(self.svg)

        self.resolver = SymbolResolver(self.settings, self.catalog, override=symbol_override)

    @classmethod
    def standalone(
        cls,
        width: float,
        height: float,
        settings: ChartSettings | None = None,
        element_id: str = "paper",
        **kwargs: object,
    ) -> "ChartPaper":
        """Create a paper mounted in a fresh detached container."""

        host = SvgDocument(width, height).container(element_id)
        return cls(host, element_id, width, height, settings, **kwargs)  # type: ignore[arg-type]

    # Symbols -----------------------------------------------------------
    def get_symbol(self, name: str, x: float, y: float) -> SvgElement:
        """Return a detached group drawing ``name`` centred on ``(x, y)``."""

        return self.resolver.resolve(name, x, y, self)

    def draw_glyph(self, glyph: Glyph, x: float, y: float) -> SvgElement:
        s = self.settings
        scale = s.symbol_scale
        ax, ay = glyph.anchor(x, y, scale)

        wrapper = SvgElement("g").set(
            id=self.glyph_wrapper_id(glyph),
            transform=scale_transform(ax, ay, scale),
        )
        style = self._category_style(glyph)

        anchored = [part for part in glyph.parts if part.anchored]
        if anchored:
            wrapper.set(**style)
            group = SvgElement("g").set(transform=f"translate({ax},{ay})")
            for part in anchored:
                group.add(SvgElement("path").set(d=part.normalised_path()))
            wrapper.add(group)
        for part in glyph.parts:
            if part.anchored:
                continue
            dx, dy = part.offset
            node = SvgElement("path").set(d=f"m{fmt(ax + dx)}, {fmt(ay + dy)} {part.normalised_path()}")
            if not anchored:
                node.set(**style)
            wrapper.add(node)

        if s.add_click_area:
            cx, cy = glyph.click_offset
            wrapper.add(self.create_rect_for_click(ax + cx, ay + cy))
        return wrapper

    def _category_style(self, glyph: Glyph) -> dict[str, object]:
        s = self.settings
        if glyph.category is SymbolCategory.POINTS:
            return {"stroke": s.points_color, "stroke_width": s.points_stroke, "fill": glyph.fill}
        if glyph.category is SymbolCategory.SIGNS:
            return {"stroke": s.signs_color, "stroke_width": s.signs_stroke, "fill": glyph.fill}
        if glyph.category is SymbolCategory.CUSPS:
            return {
                "stroke": s.cusps_font_color,
                "stroke_width": s.cusps_stroke * s.symbol_scale,
                "fill": glyph.fill,
            }
        return {
            "stroke": s.symbol_axis_font_color,
            "stroke_width": s.symbol_axis_stroke * s.symbol_scale,
            "fill": glyph.fill,
        }

    def create_rect_for_click(self, x: float, y: float) -> SvgElement:
        """Transparent 20×20 px hit area anchored at ``(x, y)``."""

        stroke = self.settings.signs_stroke
        return SvgElement("rect").set(
            x=x - stroke,
            y=y - stroke,
            width=CLICK_AREA_SIZE,
            height=CLICK_AREA_SIZE,
            fill="transparent",
            stroke="none",
        )

    # Identifiers -------------------------------------------------------
    def glyph_wrapper_id(self, glyph: Glyph) -> str:
        """Deterministic id for ``glyph`` derived from its category and configured name."""

        name = self.settings.name_for(glyph.key)
        if glyph.category is SymbolCategory.CUSPS:
            return self.house_wrapper_id(name)
        if glyph.category is SymbolCategory.SIGNS:
            return self.sign_wrapper_id(name)
        if glyph.category is SymbolCategory.AXIS:
            return self.axis_wrapper_id(name)
        return self.point_wrapper_id(name)

    def _wrapper_id(self, category_id: str, name: object) -> str:
        return f"{self.paper_id}-{self.settings.id_radix}-{category_id}-{name}"

    def sign_wrapper_id(self, sign: object) -> str:
        return self._wrapper_id(self.settings.id_signs, sign)

    def house_wrapper_id(self, house: object) -> str:
        return self._wrapper_id(self.settings.id_cusps, house)

    def point_wrapper_id(self, point: object) -> str:
        return self._wrapper_id(self.settings.id_points, point)

    def axis_wrapper_id(self, axis: object) -> str:
        return self._wrapper_id(self.settings.id_axis, axis)

    # Primitives --------------------------------------------------------
    def segment(
        self,
        cx: float,
        cy: float,
        radius: float,
        angle_from: float,
        angle_to: float,
        thickness: float,
        large_arc_flag: int = 0,
        sweep_flag: int = 0,
    ) -> SvgElement:
        d = segment_path(
            cx,
            cy,
            radius,
            angle_from,
            angle_to,
            thickness,
            large_arc_flag,
            sweep_flag,
            shift_in_degrees=self.settings.shift_in_degrees,
        )
        return SvgElement("path").set(d=d, fill="none")

    def line(self, x1: float, y1: float, x2: float, y2: float) -> SvgElement:
        return SvgElement("line").set(x1=x1, y1=y1, x2=x2, y2=y2)

    def circle(self, cx: float, cy: float, radius: float) -> SvgElement:
        return SvgElement("circle").set(cx=cx, cy=cy, r=radius, fill="none")

    def text(self, txt: str, x: float, y: float, size: str, color: str) -> SvgElement:
        return SvgElement("text", text=txt).set(
            x=x,
            y=y,
            font_size=size,
            fill=color,
            font_family="serif",
            dominant_baseline="central",
            transform=scale_transform(x, y, self.settings.symbol_scale),
        )

    # Tree management ---------------------------------------------------
    def append(self, element: SvgElement) -> SvgElement:
        self.root.add(element)
        return element

    def remove(self, element_id: str) -> bool:
        removed = self.root.remove(element_id)
        if not removed:
            LOG.debug("No element %r to remove from %s", element_id, self.paper_id)
        return removed

    def clear(self) -> None:
        self.root.children.clear()

    def to_string(self, pretty: bool = False) -> str:
        return self.svg.to_string(pretty=pretty)


__all__ = ["ChartPaper", "RootElementNotFound", "CLICK_AREA_SIZE"]
