"""Collision-aware polar placement for chart point glyphs.

Points that sit close together on the wheel would draw their glyphs on top
of each other.  :class:`Labeler` walks the requests in wheel order and moves
each glyph inwards or outwards until its footprint is free; when the band is
full the glyph is parked on ``outer_radius`` with a leader line back to its
true longitude.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .geometry import angular_distance, normalize_degrees, point_position

Point = Tuple[float, float]


@dataclass(frozen=True)
class LabelRequest:
    """A glyph of ``width`` x ``height`` pixels wanted at ``angle``/``radius``."""

    identifier: str
    angle: float
    radius: float
    width: float
    height: float


@dataclass(frozen=True)
class PolarBounds:
    """Footprint of a glyph: an angular span around ``angle`` and a radial band."""

    angle: float
    half_span: float
    radius_min: float
    radius_max: float

    @classmethod
    def around(cls, request: LabelRequest, angle: float, radius: float) -> "PolarBounds":
        # The tangential width becomes an arc; at the centre it covers everything.
        if radius > 0.0:
            half_span = min(math.degrees(request.width / radius) / 2.0, 180.0)
        else:
            half_span = 180.0
        half_height = request.height / 2.0
        return cls(normalize_degrees(angle), half_span, radius - half_height, radius + half_height)

    def overlaps(
        self,
        other: "PolarBounds",
        angle_tolerance: float = 0.01,
        radial_tolerance: float = 0.01,
    ) -> bool:
        radial_gap = max(self.radius_min - other.radius_max, other.radius_min - self.radius_max)
        if radial_gap >= -radial_tolerance:
            return False
        angular_gap = angular_distance(self.angle, other.angle) - (self.half_span + other.half_span)
        return angular_gap < -angle_tolerance


@dataclass
class LabelPlacement:
    """Where a glyph ended up, and the leader line if it was pushed out."""

    identifier: str
    angle: float
    radius: float
    x: float
    y: float
    request: LabelRequest = field(repr=False, compare=False)
    leader: bool = False
    leader_start: Optional[Point] = None
    leader_end: Optional[Point] = None

    def bounds(self) -> PolarBounds:
        return PolarBounds.around(self.request, self.angle, self.radius)


class Labeler:
    """Place glyphs in a polar band of ``band_height`` around ``band_radius``.

    Radii are tried in the order ``r, r - step, r + step, r - 2*step ...``
    for ``max_iterations`` steps; slots falling below the inner edge of the
    band are skipped.
    """

    def __init__(
        self,
        cx: float,
        cy: float,
        band_radius: float,
        band_height: float,
        *,
        shift_in_degrees: float = 180.0,
        outer_radius: Optional[float] = None,
        radial_step: float = 6.0,
        max_iterations: int = 5,
    ) -> None:
        self.cx = cx
        self.cy = cy
        self.band_radius = band_radius
        self.band_height = band_height
        self.shift_in_degrees = shift_in_degrees
        self.outer_radius = band_radius + band_height * 1.5 if outer_radius is None else outer_radius
        self.radial_step = radial_step
        self.max_iterations = max_iterations

    @property
    def inner_edge(self) -> float:
        return self.band_radius - self.band_height / 2.0

    def place(self, requests: Sequence[LabelRequest]) -> List[LabelPlacement]:
        occupied: List[PolarBounds] = []
        placements: List[LabelPlacement] = []
        for request in sorted(requests, key=lambda r: (normalize_degrees(r.angle), r.identifier)):
            placement = self._place(request, occupied)
            if not placement.leader:
                occupied.append(placement.bounds())
            placements.append(placement)
        return placements

    def _xy(self, angle: float, radius: float) -> Point:
        return point_position(self.cx, self.cy, radius, angle, self.shift_in_degrees)

    def _radii(self, base: float) -> Iterator[float]:
        yield base
        for step in range(1, self.max_iterations + 1):
            yield base - step * self.radial_step
            yield base + step * self.radial_step

    def _place(self, request: LabelRequest, occupied: Sequence[PolarBounds]) -> LabelPlacement:
        angle = normalize_degrees(request.angle)
        base = request.radius or self.band_radius
        for radius in self._radii(base):
            if radius < self.inner_edge:
                continue
            candidate = PolarBounds.around(request, angle, radius)
            if not any(candidate.overlaps(taken) for taken in occupied):
                x, y = self._xy(angle, radius)
                return LabelPlacement(request.identifier, angle, radius, x, y, request)

        parked = self._xy(angle, self.outer_radius)
        return LabelPlacement(
            request.identifier,
            angle,
            self.outer_radius,
            parked[0],
            parked[1],
            request,
            leader=True,
            leader_start=self._xy(angle, base),
            leader_end=parked,
        )


__all__ = ["LabelRequest", "LabelPlacement", "PolarBounds", "Labeler"]
