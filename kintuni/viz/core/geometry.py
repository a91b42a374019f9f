"""Polar geometry shared by the chart paper and radix layout.

Angles follow the horoscope-wheel convention: a chart angle ``a`` is drawn at
``(shift_in_degrees - a) mod 360`` in SVG screen space, so with the default
shift of 180° the zero angle sits on the left and angles grow
counter-clockwise.
"""
from __future__ import annotations

import math
from typing import Tuple


def js_round(value: float) -> int:
    """Round half up, matching browser ``Math.round`` semantics."""

    return int(math.floor(value + 0.5))


def fmt(value: float) -> str:
    """Format a number for SVG attributes.

    Integral values are written without a fractional part and ``-0`` is
    written as ``0``; other values use ``repr`` to keep full precision.
    """

    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def scale_transform(x: float, y: float, scale: float) -> str:
    """Return the transform scaling around ``(x, y)`` instead of the origin."""

    return (
        f"translate({fmt(-x * (scale - 1))},{fmt(-y * (scale - 1))}) "
        f"scale({fmt(scale)})"
    )


def normalize_degrees(value: float) -> float:
    v = value % 360.0
    return v + 360.0 if v < 0 else v


def angular_distance(a: float, b: float) -> float:
    """Smallest separation between two ecliptic longitudes (0-180)."""

    delta = abs(normalize_degrees(a) - normalize_degrees(b))
    return 360.0 - delta if delta > 180.0 else delta


def chart_radians(angle: float, shift_in_degrees: float) -> float:
    return ((shift_in_degrees - angle) % 360.0) * math.pi / 180.0


def point_position(
    cx: float,
    cy: float,
    radius: float,
    angle: float,
    shift_in_degrees: float,
) -> Tuple[float, float]:
    """Cartesian position of ``angle`` on a circle of ``radius``."""

    theta = chart_radians(angle, shift_in_degrees)
    return cx + radius * math.cos(theta), cy + radius * math.sin(theta)


def segment_path(
    cx: float,
    cy: float,
    radius: float,
    angle_from: float,
    angle_to: float,
    thickness: float,
    large_arc_flag: int = 0,
    sweep_flag: int = 0,
    *,
    shift_in_degrees: float,
) -> str:
    """Path data for an annular wedge between ``thickness`` and ``radius``.

    The wedge starts on the inner circle at ``angle_from``, runs out to the
    outer circle, follows it to ``angle_to``, comes back in and closes along
    the inner circle. See https://www.w3.org/TR/SVG/paths.html#PathData for
    the arc flags.
    """

    a1 = chart_radians(angle_from, shift_in_degrees)
    a2 = chart_radians(angle_to, shift_in_degrees)
    span = radius - thickness

    start_x = cx + thickness * math.cos(a1)
    start_y = cy + thickness * math.sin(a1)
    return (
        f"M {fmt(start_x)}, {fmt(start_y)}"
        f" l {fmt(span * math.cos(a1))}, {fmt(span * math.sin(a1))}"
        f" A {fmt(radius)}, {fmt(radius)},0 ,{large_arc_flag}, {sweep_flag},"
        f" {fmt(cx + radius * math.cos(a2))}, {fmt(cy + radius * math.sin(a2))}"
        f" l {fmt(span * -math.cos(a2))}, {fmt(span * -math.sin(a2))}"
        f" A {fmt(thickness)}, {fmt(thickness)},0 ,{large_arc_flag}, 1,"
        f" {fmt(start_x)}, {fmt(start_y)}"
    )


__all__ = [
    "js_round",
    "fmt",
    "scale_transform",
    "normalize_degrees",
    "angular_distance",
    "chart_radians",
    "point_position",
    "segment_path",
]
