import re

import pytest

from kintuni.config.settings import ChartSettings
from kintuni.viz.core.geometry import fmt
from kintuni.viz.core.glyphs import default_catalog
from kintuni.viz.core.svg import SvgDocument, SvgElement
from kintuni.viz.core.symbols import DEFAULT_SYMBOL_NAMES, SymbolKey
from kintuni.viz.paper import ChartPaper, RootElementNotFound

TRANSFORM = re.compile(r"translate\((-?[\d.]+),(-?[\d.]+)\) scale\(([\d.]+)\)")


def _transform(element):
    match = TRANSFORM.fullmatch(element.get("transform"))
    assert match is not None
    return tuple(float(value) for value in match.groups())


def test_missing_root_container_raises():
    host = SvgElement("div").set(id="somewhere-else")

    with pytest.raises(RootElementNotFound):
        ChartPaper(host, "horoscope", 300, 300)
    assert issubclass(RootElementNotFound, LookupError)


def test_paper_mounts_svg_in_root_container():
    page = SvgDocument(800, 600)
    host = page.container("horoscope")
    page.add(host)

    paper = ChartPaper(page, "horoscope", 300, 200)

    (svg,) = host.children
    assert svg is paper.svg
    assert svg.get("viewBox") == "0 0 300 200"
    assert svg.get("version") == "1.1"
    assert paper.root.id == "horoscope-astrology"
    assert svg.children == [paper.root]
    assert paper.to_string().startswith("<svg")


@pytest.mark.parametrize("scale", [1, 2, 3])
@pytest.mark.parametrize("key", list(SymbolKey), ids=lambda key: key.value)
def test_glyph_centre_stays_on_requested_point_at_any_scale(key, scale):
    x, y = 123.4, 210.7
    glyph = default_catalog().get(key)
    paper = ChartPaper.standalone(400, 400, ChartSettings(symbol_scale=scale))

    symbol = paper.get_symbol(DEFAULT_SYMBOL_NAMES[key.value], x, y)

    ax, ay = glyph.anchor(x, y, scale)
    # Undoing the shift lands back on the requested point, up to rounding.
    assert abs(ax - glyph.x_shift * scale - x) <= 0.5
    assert abs(ay - glyph.y_shift * scale - y) <= 0.5

    # The scale transform leaves the anchor where it is.
    tx, ty, s = _transform(symbol)
    assert s == scale
    assert ax * s + tx == pytest.approx(ax)
    assert ay * s + ty == pytest.approx(ay)

    # Path data is the same at every scale; only the move to the anchor varies.
    relative = [part for part in glyph.parts if not part.anchored]
    drawn = [child for child in symbol.children if child.tag == "path"]
    assert len(drawn) == len(relative)
    for part, node in zip(relative, drawn):
        dx, dy = part.offset
        assert node.get("d") == f"m{fmt(ax + dx)}, {fmt(ay + dy)} {part.normalised_path()}"
    for group in (child for child in symbol.children if child.tag == "g"):
        assert group.get("transform") == f"translate({ax},{ay})"


def test_wrapper_ids_are_deterministic(paper):
    assert paper.sign_wrapper_id("Aries") == paper.sign_wrapper_id("Aries")
    assert paper.sign_wrapper_id("Aries") != paper.sign_wrapper_id("Taurus")
    assert paper.house_wrapper_id("1") == paper.house_wrapper_id("1")
    assert paper.house_wrapper_id("1") != paper.house_wrapper_id("2")

    assert paper.sign_wrapper_id("Aries") == "chart-astrology-radix-signs-Aries"
    assert paper.house_wrapper_id("12") == "chart-astrology-radix-cusps-12"
    assert paper.point_wrapper_id("Sun") == "chart-astrology-radix-planets-Sun"
    assert paper.axis_wrapper_id("Mc") == "chart-astrology-radix-axis-Mc"


def test_glyph_groups_carry_wrapper_ids(paper):
    assert paper.get_symbol("Leo", 0, 0).id == paper.sign_wrapper_id("Leo")
    assert paper.get_symbol("7", 0, 0).id == paper.house_wrapper_id("7")
    assert paper.get_symbol("As", 0, 0).id == paper.axis_wrapper_id("As")
    assert paper.get_symbol("Fortune", 0, 0).id == paper.point_wrapper_id("Fortune")


@pytest.mark.parametrize("name", sorted(DEFAULT_SYMBOL_NAMES.values()))
def test_click_area_adds_one_transparent_rect(name):
    plain = ChartPaper.standalone(300, 300, ChartSettings(add_click_area=False))
    clickable = ChartPaper.standalone(300, 300, ChartSettings(ADD_CLICK_AREA=True))

    without = plain.get_symbol(name, 150, 150)
    with_rect = clickable.get_symbol(name, 150, 150)

    assert len(with_rect.children) == len(without.children) + 1
    rect = with_rect.children[-1]
    assert rect.tag == "rect"
    assert rect.get("stroke") == "none"
    assert rect.get("fill") == "transparent"
    assert rect.get("width") == "20px"
    assert rect.get("height") == "20px"


def test_click_rect_uses_glyph_offset_and_sign_stroke():
    paper = ChartPaper.standalone(300, 300, ChartSettings(add_click_area=True, signs_stroke=2))

    jupiter = paper.get_symbol("Jupiter", 100, 100)

    # Jupiter shifts by (-5, -2) and offsets its hit area 3px up.
    rect = jupiter.children[-1]
    assert rect.get("x") == "93"
    assert rect.get("y") == "93"


def test_category_stroke_widths():
    paper = ChartPaper.standalone(300, 300, ChartSettings(symbol_scale=2))

    sun_path = paper.get_symbol("Sun", 0, 0).children[0]
    aries_path = paper.get_symbol("Aries", 0, 0).children[0]
    cusp_path = paper.get_symbol("1", 0, 0).children[0]
    axis_path = paper.get_symbol("Mc", 0, 0).children[0]

    assert sun_path.get("stroke-width") == "1.8"
    assert sun_path.get("fill") == "none"
    assert aries_path.get("stroke-width") == "1.5"
    assert cusp_path.get("stroke-width") == "2"
    assert axis_path.get("stroke-width") == "3.2"
    assert axis_path.get("stroke") == "#333"


def test_solid_signs_keep_their_fill(paper):
    assert paper.get_symbol("Taurus", 0, 0).children[0].get("fill") == "#020202"
    assert paper.get_symbol("Leo", 0, 0).children[0].get("fill") == "#000000"


def test_fortune_is_drawn_inside_translated_group(paper):
    fortune = paper.get_symbol("Fortune", 50, 50)

    assert fortune.get("stroke") == "#000"
    (group,) = fortune.children
    assert group.get("transform") == "translate(40,42)"
    assert len(group.find_all("path")) == 3


def test_text_carries_scale_transform():
    paper = ChartPaper.standalone(300, 300, ChartSettings(symbol_scale=1.5))

    text = paper.text("R", 10, 20, "8px", "#000")

    assert text.text == "R"
    assert text.get("font-family") == "serif"
    assert text.get("dominant-baseline") == "central"
    assert text.get("font-size") == "8px"
    assert text.get("transform") == "translate(-5,-10) scale(1.5)"


def test_primitives(paper):
    segment = paper.segment(200, 200, 100, 0, 30, 80)
    assert segment.tag == "path"
    assert segment.get("fill") == "none"
    assert segment.get("d").count("A") == 2

    line = paper.line(0, 1, 2, 3)
    assert (line.get("x1"), line.get("y1"), line.get("x2"), line.get("y2")) == ("0", "1", "2", "3")

    circle = paper.circle(5, 6, 7)
    assert circle.get("r") == "7"
    assert circle.get("fill") == "none"


def test_append_remove_and_clear(paper):
    symbol = paper.append(paper.get_symbol("Venus", 100, 100))

    assert paper.root.find_by_id(symbol.id) is symbol
    assert paper.remove(symbol.id) is True
    assert paper.remove(symbol.id) is False

    paper.append(paper.circle(1, 1, 1))
    paper.clear()
    assert paper.root.children == []


def test_click_rect_on_styled_wrapper_is_not_stroked():
    paper = ChartPaper.standalone(300, 300, ChartSettings(add_click_area=True))

    fortune = paper.get_symbol("Fortune", 100, 100)

    # Fortune carries its stroke on the wrapper, which the rect would inherit.
    assert fortune.get("stroke") == "#000"
    (rect,) = fortune.find_all("rect")
    assert rect.get("stroke") == "none"
    assert rect.get("fill") == "transparent"


def test_house_ids_follow_configured_cusp_names():
    names = dict(DEFAULT_SYMBOL_NAMES, cusp_1="I", cusp_12="XII")
    paper = ChartPaper.standalone(300, 300, ChartSettings(symbol_names=names), element_id="chart")

    assert paper.get_symbol("I", 10, 10).id == "chart-astrology-radix-cusps-I"
    assert paper.get_symbol("XII", 10, 10).id == paper.house_wrapper_id("XII")
    assert paper.get_symbol("2", 10, 10).id == "chart-astrology-radix-cusps-2"
