"""Radix (natal wheel) layout built on :class:`~kintuni.viz.paper.ChartPaper`.

The wheel is rotated so the first house cusp (the ascendant) sits on the
left.  Longitudes are converted to chart angles by adding
``360 - cusps[0]``; :func:`~kintuni.viz.core.geometry.point_position`
then applies the paper's ``shift_in_degrees`` convention.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator

from kintuni.config.settings import ChartSettings

from .aspects import AspectHit, find_aspects
from .core.geometry import normalize_degrees, point_position
from .core.labeler import Labeler, LabelRequest
from .core.svg import SvgElement
from .core.symbols import AXIS_KEYS, ZODIAC_SIGNS, cusp_key
from .paper import ChartPaper

LOG = logging.getLogger(__name__)

# Axis glyphs and the cusp index (0-based) they sit on.
_AXIS_CUSPS: Tuple[int, ...] = (0, 6, 9, 3)


class ChartData(BaseModel):
    """Chart points as delivered by the horoscope calculation.

    ``planets`` maps a symbol name to ``[longitude, speed?]``; a negative
    speed marks the point as retrograde.  ``cusps`` holds the twelve house
    cusp longitudes starting with the ascendant.
    """

    planets: Dict[str, List[float]] = Field(default_factory=dict)
    cusps: List[float]

    @field_validator("planets")
    @classmethod
    def _finite_planets(cls, value: Dict[str, List[float]]) -> Dict[str, List[float]]:
        for name, values in value.items():
            if any(not math.isfinite(v) for v in values):
                raise ValueError(f"point '{name}' has non-finite values")
        return value

    @field_validator("cusps")
    @classmethod
    def _twelve_cusps(cls, value: List[float]) -> List[float]:
        if len(value) != 12:
            raise ValueError(f"expected 12 cusps, got {len(value)}")
        if any(not math.isfinite(v) for v in value):
            raise ValueError("cusps must be finite numbers")
        return value

    def longitudes(self) -> Dict[str, float]:
        """Longitude per point, skipping points without data."""

        return {
            name: normalize_degrees(values[0])
            for name, values in self.planets.items()
            if values
        }

    def is_retrograde(self, name: str) -> bool:
        values = self.planets.get(name) or []
        return len(values) > 1 and values[1] < 0


class RadixChart:
    """Draw a complete natal wheel onto ``paper``."""

    def __init__(self, paper: ChartPaper, data: ChartData) -> None:
        self.paper = paper
        self.data = data
        self.settings: ChartSettings = paper.settings

        s = self.settings
        self.cx = paper.width / 2
        self.cy = paper.height / 2
        self.radius = min(paper.width, paper.height) / 2 - s.margin
        self.shift = 360.0 - data.cusps[0]

        ring = self.radius / s.inner_circle_radius_ratio
        self.ring_radius = self.radius - ring
        self.ruler_width = ring / s.ruler_radius if s.ruler_radius else 0.0
        self.ruler_radius = self.ring_radius - self.ruler_width
        self.point_radius = self.ruler_radius - (self.ruler_width * 2 + s.padding * s.symbol_scale)
        self.indoor_radius = self.radius / s.indoor_circle_radius_ratio

        self.radix_id = f"{paper.paper_id}-{s.id_radix}"
        self.group: SvgElement | None = None

    def angle_of(self, longitude: float) -> float:
        return normalize_degrees(longitude + self.shift)

    def _position(self, radius: float, longitude: float) -> Tuple[float, float]:
        return point_position(self.cx, self.cy, radius, self.angle_of(longitude), self.settings.shift_in_degrees)

    def _layer(self, group: SvgElement, category_id: str) -> SvgElement:
        layer = SvgElement("g").set(id=f"{self.radix_id}-{category_id}")
        group.add(layer)
        return layer

    # Drawing -----------------------------------------------------------
    def draw(self) -> ChartPaper:
        self._draw_wheel()
        return self.paper

    def _draw_wheel(self) -> SvgElement:
        self.paper.remove(self.radix_id)
        group = self.paper.append(SvgElement("g").set(id=self.radix_id))
        self.group = group
        self._draw_background(group)
        self._draw_signs(group)
        self._draw_ruler(group)
        self._draw_cusps(group)
        self._draw_axis(group)
        self._draw_points(group)
        self._draw_circles(group)
        return group

    def aspects(self) -> list[AspectHit]:
        """Draw aspect lines inside the indoor circle and return the hits."""

        group = self.group if self.group is not None else self._draw_wheel()
        s = self.settings
        group.remove(f"{self.radix_id}-{s.id_aspects}")
        layer = self._layer(group, s.id_aspects)
        positions = self.data.longitudes()
        hits = find_aspects(positions, s.aspects)
        for hit in hits:
            x1, y1 = self._position(self.indoor_radius, positions[hit.a])
            x2, y2 = self._position(self.indoor_radius, positions[hit.b])
            line = self.paper.line(x1, y1, x2, y2).set(
                id=f"{self.radix_id}-{s.id_aspects}-{hit.a}-{hit.b}",
                stroke=hit.color,
                stroke_width=s.symbol_scale,
                data_name=hit.aspect,
            )
            layer.add(line)
        return hits

    def _draw_background(self, group: SvgElement) -> None:
        s = self.settings
        bg = self.paper.circle(self.cx, self.cy, self.radius)
        bg.set(stroke=s.circle_color, stroke_width=s.circle_strong * s.symbol_scale)
        group.add(bg)

    def _draw_signs(self, group: SvgElement) -> None:
        s = self.settings
        layer = self._layer(group, s.id_signs)
        step = 30.0
        for index, sign in enumerate(ZODIAC_SIGNS):
            start = index * step
            segment = self.paper.segment(
                self.cx,
                self.cy,
                self.radius,
                self.angle_of(start),
                self.angle_of(start + step),
                self.ring_radius,
            )
            if s.stroke_only:
                segment.set(stroke=s.circle_color, stroke_width=s.symbol_scale)
            else:
                segment.set(fill=s.colors_signs[index])
            layer.add(segment)

            x, y = self._position(self.radius - (self.radius - self.ring_radius) / 2, start + step / 2)
            layer.add(self.paper.get_symbol(s.name_for(sign), x, y))

    def _draw_ruler(self, group: SvgElement) -> None:
        s = self.settings
        for index, lon in enumerate(range(0, 360, 5)):
            length = self.ruler_width if index % 2 == 0 else self.ruler_width / 2
            x1, y1 = self._position(self.ring_radius, lon)
            x2, y2 = self._position(self.ring_radius - length, lon)
            group.add(
                self.paper.line(x1, y1, x2, y2).set(stroke=s.circle_color, stroke_width=s.symbol_scale)
            )
        ruler = self.paper.circle(self.cx, self.cy, self.ruler_radius)
        ruler.set(stroke=s.circle_color, stroke_width=s.symbol_scale)
        group.add(ruler)

    def _draw_cusps(self, group: SvgElement) -> None:
        s = self.settings
        layer = self._layer(group, s.id_cusps)
        cusps = self.data.cusps
        for index, lon in enumerate(cusps):
            x1, y1 = self._position(self.indoor_radius, lon)
            x2, y2 = self._position(self.ruler_radius, lon)
            bold = index in _AXIS_CUSPS
            layer.add(
                self.paper.line(x1, y1, x2, y2).set(
                    stroke=s.line_color,
                    stroke_width=(s.circle_strong if bold else 1) * s.symbol_scale,
                )
            )

            following = cusps[(index + 1) % 12]
            gap = normalize_degrees(following - lon)
            tx, ty = self._position(
                self.indoor_radius + s.collision_radius * 1.4 * s.symbol_scale,
                lon + gap / 2,
            )
            layer.add(self.paper.get_symbol(s.name_for(cusp_key(index + 1)), tx, ty))

    def _draw_axis(self, group: SvgElement) -> None:
        s = self.settings
        layer = self._layer(group, s.id_axis)
        axis_radius = self.radius + (self.radius - self.ring_radius) / 4
        for key, cusp_index in zip(AXIS_KEYS, _AXIS_CUSPS):
            lon = self.data.cusps[cusp_index]
            x1, y1 = self._position(self.radius, lon)
            x2, y2 = self._position(axis_radius, lon)
            layer.add(
                self.paper.line(x1, y1, x2, y2).set(
                    stroke=s.line_color, stroke_width=s.circle_strong * s.symbol_scale
                )
            )
            sx, sy = self._position(axis_radius + s.collision_radius * s.symbol_scale, lon)
            layer.add(self.paper.get_symbol(s.name_for(key), sx, sy))

    def _draw_points(self, group: SvgElement) -> None:
        s = self.settings
        layer = self._layer(group, s.id_points)
        positions = self.data.longitudes()
        skipped = [name for name, values in self.data.planets.items() if not values]
        if skipped:
            LOG.debug("Skipping points without longitude: %s", ", ".join(skipped))

        size = s.collision_radius * 2 * s.symbol_scale
        labeler = Labeler(
            self.cx,
            self.cy,
            self.point_radius,
            size * 3,
            shift_in_degrees=s.shift_in_degrees,
            outer_radius=self.point_radius - size * 1.5,
            radial_step=size / 2,
            max_iterations=2,
        )
        requests = [
            LabelRequest(
                identifier=name,
                angle=self.angle_of(lon),
                radius=self.point_radius,
                width=size,
                height=size,
            )
            for name, lon in positions.items()
        ]
        for placement in labeler.place(requests):
            name = placement.identifier
            lon = positions[name]
            if placement.leader:
                LOG.debug("Point %r has no free slot; drawing with a leader line", name)

            # Pointer from the ruler to the true longitude.
            px1, py1 = self._position(self.ruler_radius, lon)
            px2, py2 = self._position(self.ruler_radius - self.ruler_width, lon)
            layer.add(
                self.paper.line(px1, py1, px2, py2).set(
                    stroke=s.points_color, stroke_width=s.symbol_scale
                )
            )

            symbol = self.paper.get_symbol(name, placement.x, placement.y)
            if symbol.id is None:
                # Override and placeholder elements are left untouched.
                symbol = SvgElement("g").set(id=self.paper.point_wrapper_id(name)).add(symbol)
            layer.add(symbol)

            if placement.leader_start and placement.leader_end:
                (lx1, ly1), (lx2, ly2) = placement.leader_start, placement.leader_end
                layer.add(
                    self.paper.line(lx1, ly1, lx2, ly2).set(
                        stroke=s.points_color, stroke_width=s.symbol_scale / 2
                    )
                )

            if self.data.is_retrograde(name):
                rx, ry = point_position(
                    self.cx,
                    self.cy,
                    placement.radius - size / 2 - s.padding * s.symbol_scale / 2,
                    placement.angle,
                    s.shift_in_degrees,
                )
                layer.add(self.paper.text("R", rx, ry, f"{s.points_text_size}px", s.points_color))

    def _draw_circles(self, group: SvgElement) -> None:
        s = self.settings
        for radius in (self.ring_radius, self.indoor_radius):
            circle = self.paper.circle(self.cx, self.cy, radius)
            circle.set(stroke=s.circle_color, stroke_width=s.circle_strong * s.symbol_scale)
            group.add(circle)


def render_radix_svg(
    data: ChartData,
    width: float = 600,
    height: float = 600,
    settings: ChartSettings | None = None,
    *,
    aspects: bool = True,
    element_id: str = "paper",
    pretty: bool = False,
) -> str:
    """Render ``data`` into a standalone ``<svg>`` string."""

    paper = ChartPaper.standalone(width, height, settings, element_id=element_id)
    chart = RadixChart(paper, data)
    chart.draw()
    if aspects:
        chart.aspects()
    return paper.to_string(pretty=pretty)


__all__ = ["ChartData", "RadixChart", "render_radix_svg"]
