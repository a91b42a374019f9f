"""Embedded vector glyphs for chart symbols.

Each glyph is hand-authored path data plus a small amount of placement
metadata: the pixel shift from the requested point to the glyph's visual
centre, the fill mode, and the offset of the optional click rectangle.
The drawing code in :mod:`kintuni.viz.paper` is shared by every glyph; only
this data varies.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any, Tuple

from .geometry import js_round
from .symbols import SymbolCategory, SymbolKey

GLYPH_ASSET = "glyphs.json"


@dataclass(frozen=True)
class GlyphPart:
    """One sub-path of a glyph.

    Relative parts are prefixed with a move to the shifted anchor plus
    ``offset``.  Anchored parts hold absolute coordinates and are drawn
    inside a group translated to the shifted anchor.
    """

    path: str
    offset: Tuple[float, float] = (0.0, 0.0)
    anchored: bool = False

    def normalised_path(self) -> str:
        return " ".join(self.path.split())


@dataclass(frozen=True)
class Glyph:
    """A named, centred vector drawing keyed by :class:`SymbolKey`."""

    key: SymbolKey
    category: SymbolCategory
    x_shift: float
    y_shift: float
    parts: Tuple[GlyphPart, ...]
    fill: str = "none"
    click_offset: Tuple[float, float] = (0.0, 0.0)

    def anchor(self, x: float, y: float, scale: float) -> Tuple[int, int]:
        """Shifted anchor for a glyph requested at ``(x, y)``."""

        return js_round(x + self.x_shift * scale), js_round(y + self.y_shift * scale)

    @classmethod
    def from_payload(cls, key: str, meta: Mapping[str, Any]) -> "Glyph":
        symbol = SymbolKey(key)
        shift = _pair(meta.get("shift", (0.0, 0.0)))
        parts = tuple(
            GlyphPart(
                path=str(part["path"]),
                offset=_pair(part.get("offset", (0.0, 0.0))),
                anchored=bool(part.get("anchored", False)),
            )
            for part in meta["parts"]
        )
        if not parts:
            raise ValueError(f"Glyph '{key}' defines no path data")
        return cls(
            key=symbol,
            category=SymbolCategory(meta["category"]),
            x_shift=shift[0],
            y_shift=shift[1],
            parts=parts,
            fill=str(meta.get("fill", "none")),
            click_offset=_pair(meta.get("click_offset", (0.0, 0.0))),
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "category": self.category.value,
            "shift": [self.x_shift, self.y_shift],
            "fill": self.fill,
            "click_offset": list(self.click_offset),
            "parts": [
                {"path": part.path, "offset": list(part.offset), "anchored": part.anchored}
                for part in self.parts
            ],
        }


def _pair(value: Sequence[Any]) -> Tuple[float, float]:
    first, second = value
    return float(first), float(second)


class GlyphCatalog:
    """Container for glyph definitions keyed by symbol."""

    def __init__(self, glyphs: Iterable[Glyph] | None = None) -> None:
        self._glyphs: MutableMapping[SymbolKey, Glyph] = {}
        if glyphs:
            for glyph in glyphs:
                self.register(glyph)

    def register(self, glyph: Glyph) -> None:
        if glyph.key in self._glyphs:
            raise ValueError(f"Glyph '{glyph.key.value}' already registered")
        self._glyphs[glyph.key] = glyph

    def replace(self, glyph: Glyph) -> None:
        self._glyphs[glyph.key] = glyph

    def get(self, key: SymbolKey | str) -> Glyph:
        try:
            return self._glyphs[SymbolKey(key)]
        except (KeyError, ValueError) as exc:
            raise KeyError(f"Unknown glyph '{key}'") from exc

    def __contains__(self, key: object) -> bool:
        try:
            return SymbolKey(key) in self._glyphs  # type: ignore[arg-type]
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self._glyphs.values())

    def __len__(self) -> int:
        return len(self._glyphs)

    def keys(self) -> list[SymbolKey]:
        return list(self._glyphs)

    def load_from_payload(self, payload: Mapping[str, Mapping[str, Any]]) -> None:
        for key, meta in payload.items():
            self.replace(Glyph.from_payload(key, meta))

    def as_payload(self) -> dict[str, dict[str, object]]:
        return {glyph.key.value: glyph.to_payload() for glyph in self._glyphs.values()}


def load_glyph_asset(name: str = GLYPH_ASSET) -> dict[str, Any]:
    """Read a packaged glyph asset from ``kintuni/viz/core/data``."""

    source = resources.files(__package__).joinpath("data").joinpath(name)
    with source.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def default_catalog() -> GlyphCatalog:
    catalog = GlyphCatalog()
    catalog.load_from_payload(load_glyph_asset()["glyphs"])
    return catalog


__all__ = [
    "GlyphPart",
    "Glyph",
    "GlyphCatalog",
    "default_catalog",
    "load_glyph_asset",
]
