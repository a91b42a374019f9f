"""In-memory SVG tree used by the chart renderer.

Glyphs are built as detached :class:`SvgElement` trees and attached to a
drawing surface by the caller.  Serialisation sorts attributes and never
depends on the locale, so the same chart always produces the same markup.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .geometry import fmt

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "&apos;"))


def escape(value: str) -> str:
    for raw, entity in _ESCAPES:
        value = value.replace(raw, entity)
    return value


@dataclass
class SvgElement:
    """One SVG node; attribute values are stored already formatted."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        """Assign attributes and return ``self``.

        ``stroke_width`` is written as ``stroke-width``; numbers go through
        :func:`~kintuni.viz.core.geometry.fmt`; ``None`` leaves the
        attribute untouched.
        """

        for key, value in attrs.items():
            if value is None:
                continue
            name = key.replace("_", "-")
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                self.attributes[name] = fmt(value)
            else:
                self.attributes[name] = str(value)
        return self

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def iter(self) -> Iterator["SvgElement"]:
        """Depth-first walk over this element and its descendants."""

        yield self
        for child in self.children:
            yield from child.iter()

    def find_by_id(self, element_id: str) -> Optional["SvgElement"]:
        return next((el for el in self.iter() if el.id == element_id), None)

    def find_all(self, tag: str) -> List["SvgElement"]:
        return [el for el in self.iter() if el.tag == tag]

    def remove(self, element_id: str) -> bool:
        """Detach the first descendant carrying ``element_id``."""

        for index, child in enumerate(self.children):
            if child.id == element_id:
                del self.children[index]
                return True
            if child.remove(element_id):
                return True
        return False

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        lines: List[str] = []
        self._write(lines, indent, pretty)
        return ("\n" if pretty else "").join(lines)

    def _write(self, lines: List[str], depth: int, pretty: bool) -> None:
        pad = "  " * depth if pretty else ""
        attrs = "".join(f' {name}="{escape(value)}"' for name, value in sorted(self.attributes.items()))
        if not self.children and self.text is None:
            lines.append(f"{pad}<{self.tag}{attrs}/>")
            return
        lines.append(f"{pad}<{self.tag}{attrs}>")
        if self.text is not None:
            inner = "  " * (depth + 1) if pretty else ""
            lines.append(inner + escape(self.text.strip() if pretty else self.text))
        for child in self.children:
            child._write(lines, depth + 1, pretty)
        lines.append(f"{pad}</{self.tag}>")


@dataclass
class SvgDocument:
    """A standalone ``<svg>`` element sized ``width`` x ``height``.

    The root carries the attributes browsers expect from an inline chart
    (SVG 1.1 with the xlink namespace) and a viewBox matching the size
    unless one is given.
    """

    width: float
    height: float
    viewbox: Optional[Tuple[float, float, float, float]] = None
    background: Optional[str] = None
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        box = self.viewbox or (0, 0, self.width, self.height)
        self.root = SvgElement(
            "svg",
            {
                "xmlns": SVG_NS,
                "xmlns:xlink": XLINK_NS,
                "version": "1.1",
                "style": "position: relative; overflow: hidden;",
                "viewBox": " ".join(fmt(v) for v in box),
            },
        ).set(width=self.width, height=self.height)
        if self.background:
            self.root.add(
                SvgElement("rect").set(x=0, y=0, width=self.width, height=self.height, fill=self.background)
            )

    def container(self, element_id: str, tag: str = "div") -> SvgElement:
        """Return a detached host element that a paper can be mounted into."""

        return SvgElement(tag).set(id=element_id)

    def add(self, element: SvgElement) -> SvgElement:
        self.root.add(element)
        return element

    def find_by_id(self, element_id: str) -> Optional[SvgElement]:
        return self.root.find_by_id(element_id)

    def to_string(self, pretty: bool = True) -> str:
        return self.root.to_string(pretty=pretty)
