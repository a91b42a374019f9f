import pytest

from kintuni.config.settings import ChartSettings
from kintuni.viz.core.svg import SvgElement
from kintuni.viz.core.symbols import DEFAULT_SYMBOL_NAMES
from kintuni.viz.paper import ChartPaper
from kintuni.viz.resolver import SymbolResolver


@pytest.mark.parametrize("name", sorted(DEFAULT_SYMBOL_NAMES.values()))
@pytest.mark.parametrize("x, y", [(0.0, 0.0), (-123.4, 987.6), (250.5, 250.5)])
def test_every_configured_name_resolves_to_a_group(paper, name, x, y):
    symbol = paper.get_symbol(name, x, y)

    assert isinstance(symbol, SvgElement)
    assert symbol.tag == "g"
    assert symbol.children


def test_unknown_name_draws_placeholder(paper, caplog):
    with caplog.at_level("DEBUG", logger="kintuni.viz.resolver"):
        symbol = paper.get_symbol("Sirius", 40, 60)

    assert symbol.tag == "g"
    (marker,) = symbol.children
    assert marker.tag == "circle"
    assert marker.get("r") == "8"
    assert marker.get("cx") == "40"
    assert marker.get("cy") == "60"
    assert marker.get("stroke") == "#ffff00"
    assert marker.get("stroke-width") == "1"
    assert marker.get("fill") == "#ff0000"
    assert "Sirius" in caplog.text


def test_override_takes_precedence_and_falls_through():
    sentinel = SvgElement("text", text="custom")
    calls = []

    def override(name, x, y, paper):
        calls.append((name, x, y, paper))
        return sentinel if name == "Sun" else None

    settings = ChartSettings(custom_symbol_fn=override)
    paper = ChartPaper.standalone(200, 200, settings)

    assert paper.get_symbol("Sun", 1, 2) is sentinel
    assert calls[0] == ("Sun", 1, 2, paper)

    moon = paper.get_symbol("Moon", 1, 2)
    assert moon is not sentinel
    assert moon.id == "paper-astrology-radix-planets-Moon"


def test_paper_override_replaces_settings_hook():
    settings = ChartSettings(CUSTOM_SYMBOL_FN=lambda *args: SvgElement("rect"))
    paper = ChartPaper.standalone(
        200, 200, settings, symbol_override=lambda *args: SvgElement("ellipse")
    )

    assert paper.get_symbol("Sun", 0, 0).tag == "ellipse"


def test_dispatch_table_follows_custom_names():
    names = dict(DEFAULT_SYMBOL_NAMES, sun="Sol", aries="Bélier")
    settings = ChartSettings(symbol_names=names)
    resolver = SymbolResolver(settings)

    assert resolver.glyph_for("Sol").key.value == "sun"
    assert resolver.glyph_for("Sun") is None
    assert "Bélier" in resolver.names()

    paper = ChartPaper.standalone(100, 100, settings)
    assert paper.get_symbol("Sol", 10, 10).id == "paper-astrology-radix-planets-Sol"
    assert paper.get_symbol("Sun", 10, 10).children[0].tag == "circle"
