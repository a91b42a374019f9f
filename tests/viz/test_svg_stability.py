from kintuni.viz.core.svg import SvgDocument, SvgElement


def test_svg_serialisation_is_stable():
    doc = SvgDocument(width=200, height=200)
    layer = doc.add(SvgElement("g").set(id="layer-1", transform="rotate(30 100 100)"))
    layer.add(
        SvgElement("circle").set(r=50, cy=100, cx=100, stroke="#fff", fill="none"),
        SvgElement("text", text="Sun").set(x=100, y=100, fill="#fff"),
    )

    first = doc.to_string(pretty=True)
    assert first == doc.to_string(pretty=True)
    assert '<circle cx="100" cy="100" fill="none" r="50" stroke="#fff"/>' in first
    assert "\n" not in doc.to_string(pretty=False)


def test_root_svg_carries_surface_attributes():
    root = SvgDocument(width=300, height=200).root

    assert root.get("version") == "1.1"
    assert root.get("width") == "300"
    assert root.get("height") == "200"
    assert root.get("viewBox") == "0 0 300 200"
    assert root.get("xmlns:xlink") == "http://www.w3.org/1999/xlink"
    assert root.get("style") == "position: relative; overflow: hidden;"


def test_background_rect_fills_the_surface():
    doc = SvgDocument(width=40, height=30, viewbox=(-20, -15, 40, 30), background="#fff")

    (rect,) = doc.root.children
    assert (rect.get("width"), rect.get("height"), rect.get("fill")) == ("40", "30", "#fff")
    assert doc.root.get("viewBox") == "-20 -15 40 30"


def test_set_dashes_names_and_skips_none():
    element = SvgElement("path").set(stroke_width=1.5, fill=None, d="M 0 0")

    assert element.attributes == {"stroke-width": "1.5", "d": "M 0 0"}


def test_remove_detaches_nested_element():
    doc = SvgDocument(width=10, height=10)
    outer = doc.add(SvgElement("g").set(id="outer"))
    outer.add(SvgElement("g").set(id="inner"))

    assert doc.root.remove("inner") is True
    assert doc.find_by_id("inner") is None
    assert doc.root.remove("inner") is False
    assert doc.find_by_id("outer") is outer


def test_text_and_attributes_are_escaped():
    doc = SvgDocument(width=10, height=10)
    doc.add(SvgElement("text", text="a < b & c").set(data_name='"quoted"'))

    markup = doc.to_string(pretty=False)
    assert "a &lt; b &amp; c" in markup
    assert 'data-name="&quot;quoted&quot;"' in markup
