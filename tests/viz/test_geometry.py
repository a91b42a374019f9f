import math
import re

import pytest

from kintuni.viz.core.geometry import (
    angular_distance,
    fmt,
    js_round,
    normalize_degrees,
    point_position,
    scale_transform,
    segment_path,
)

NUMBER = re.compile(r"-?\d+(?:\.\d+)?(?:e-?\d+)?")


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (-2.5, -2), (1.49, 1), (-0.4, 0), (7.0, 7)],
)
def test_js_round_rounds_half_up(value, expected):
    assert js_round(value) == expected


def test_fmt_drops_integral_fraction():
    assert fmt(3.0) == "3"
    assert fmt(-0.0) == "0"
    assert fmt(1.25) == "1.25"
    assert fmt(4) == "4"


def test_scale_transform_pins_anchor():
    assert scale_transform(10, 20, 1) == "translate(0,0) scale(1)"
    assert scale_transform(10, 20, 2) == "translate(-10,-20) scale(2)"
    assert scale_transform(10, 20, 0.5) == "translate(5,10) scale(0.5)"


def test_normalize_and_distance():
    assert normalize_degrees(-30.0) == 330.0
    assert normalize_degrees(725.0) == 5.0
    assert angular_distance(350.0, 10.0) == 20.0
    assert angular_distance(0.0, 180.0) == 180.0


def test_point_position_follows_wheel_convention():
    # Angle 0 on the left, 90 below the centre (SVG y grows downwards).
    x, y = point_position(100.0, 100.0, 50.0, 0.0, 180.0)
    assert x == pytest.approx(50.0)
    assert y == pytest.approx(100.0)

    x, y = point_position(100.0, 100.0, 50.0, 90.0, 180.0)
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(150.0)


def test_segment_is_closed_wedge_with_two_arcs():
    d = segment_path(200.0, 200.0, 100.0, 0.0, 90.0, 50.0, shift_in_degrees=180.0)

    assert d.count("A") == 2
    assert d.startswith("M ")

    numbers = [float(token) for token in NUMBER.findall(d)]
    start = numbers[0], numbers[1]
    end = numbers[-2], numbers[-1]
    assert math.isclose(start[0], end[0], abs_tol=1e-9)
    assert math.isclose(start[1], end[1], abs_tol=1e-9)

    # Starts on the inner radius at angle 0, i.e. left of the centre.
    assert start[0] == pytest.approx(150.0)
    assert start[1] == pytest.approx(200.0)


def test_segment_inner_arc_sweeps_back():
    d = segment_path(0.0, 0.0, 10.0, 30.0, 60.0, 5.0, 1, 0, shift_in_degrees=0.0)

    first, second = d.split("A")[1:]
    assert first.strip().startswith("10, 10,0 ,1, 0,")
    assert second.strip().startswith("5, 5,0 ,1, 1,")
