"""Canonical symbol keys for chart glyphs."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class SymbolCategory(str, Enum):
    """Styling/identifier family a glyph belongs to."""

    POINTS = "points"
    SIGNS = "signs"
    CUSPS = "cusps"
    AXIS = "axis"


class SymbolKey(str, Enum):
    """One key per drawable planet, point, sign, angle and cusp numeral."""

    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"
    PLUTO = "pluto"
    CHIRON = "chiron"
    LILITH = "lilith"
    NNODE = "nnode"
    SNODE = "snode"
    FORTUNE = "fortune"

    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"

    AS = "as"
    DS = "ds"
    MC = "mc"
    IC = "ic"

    CUSP_1 = "cusp_1"
    CUSP_2 = "cusp_2"
    CUSP_3 = "cusp_3"
    CUSP_4 = "cusp_4"
    CUSP_5 = "cusp_5"
    CUSP_6 = "cusp_6"
    CUSP_7 = "cusp_7"
    CUSP_8 = "cusp_8"
    CUSP_9 = "cusp_9"
    CUSP_10 = "cusp_10"
    CUSP_11 = "cusp_11"
    CUSP_12 = "cusp_12"


POINT_KEYS: Tuple[SymbolKey, ...] = (
    SymbolKey.SUN,
    SymbolKey.MOON,
    SymbolKey.MERCURY,
    SymbolKey.VENUS,
    SymbolKey.MARS,
    SymbolKey.JUPITER,
    SymbolKey.SATURN,
    SymbolKey.URANUS,
    SymbolKey.NEPTUNE,
    SymbolKey.PLUTO,
    SymbolKey.CHIRON,
    SymbolKey.LILITH,
    SymbolKey.NNODE,
    SymbolKey.SNODE,
    SymbolKey.FORTUNE,
)

# Zodiac order starting at 0° Aries.
ZODIAC_SIGNS: Tuple[SymbolKey, ...] = (
    SymbolKey.ARIES,
    SymbolKey.TAURUS,
    SymbolKey.GEMINI,
    SymbolKey.CANCER,
    SymbolKey.LEO,
    SymbolKey.VIRGO,
    SymbolKey.LIBRA,
    SymbolKey.SCORPIO,
    SymbolKey.SAGITTARIUS,
    SymbolKey.CAPRICORN,
    SymbolKey.AQUARIUS,
    SymbolKey.PISCES,
)

AXIS_KEYS: Tuple[SymbolKey, ...] = (SymbolKey.AS, SymbolKey.DS, SymbolKey.MC, SymbolKey.IC)

CUSP_KEYS: Tuple[SymbolKey, ...] = tuple(SymbolKey(f"cusp_{n}") for n in range(1, 13))


DEFAULT_SYMBOL_NAMES: Dict[str, str] = {
    SymbolKey.SUN.value: "Sun",
    SymbolKey.MOON.value: "Moon",
    SymbolKey.MERCURY.value: "Mercury",
    SymbolKey.VENUS.value: "Venus",
    SymbolKey.MARS.value: "Mars",
    SymbolKey.JUPITER.value: "Jupiter",
    SymbolKey.SATURN.value: "Saturn",
    SymbolKey.URANUS.value: "Uranus",
    SymbolKey.NEPTUNE.value: "Neptune",
    SymbolKey.PLUTO.value: "Pluto",
    SymbolKey.CHIRON.value: "Chiron",
    SymbolKey.LILITH.value: "Lilith",
    SymbolKey.NNODE.value: "NNode",
    SymbolKey.SNODE.value: "SNode",
    SymbolKey.FORTUNE.value: "Fortune",
    SymbolKey.ARIES.value: "Aries",
    SymbolKey.TAURUS.value: "Taurus",
    SymbolKey.GEMINI.value: "Gemini",
    SymbolKey.CANCER.value: "Cancer",
    SymbolKey.LEO.value: "Leo",
    SymbolKey.VIRGO.value: "Virgo",
    SymbolKey.LIBRA.value: "Libra",
    SymbolKey.SCORPIO.value: "Scorpio",
    SymbolKey.SAGITTARIUS.value: "Sagittarius",
    SymbolKey.CAPRICORN.value: "Capricorn",
    SymbolKey.AQUARIUS.value: "Aquarius",
    SymbolKey.PISCES.value: "Pisces",
    SymbolKey.AS.value: "As",
    SymbolKey.DS.value: "Ds",
    SymbolKey.MC.value: "Mc",
    SymbolKey.IC.value: "Ic",
    **{key.value: str(index) for index, key in enumerate(CUSP_KEYS, start=1)},
}


def category_of(key: SymbolKey | str) -> SymbolCategory:
    """Return the :class:`SymbolCategory` for ``key``."""

    symbol = SymbolKey(key)
    if symbol in POINT_KEYS:
        return SymbolCategory.POINTS
    if symbol in ZODIAC_SIGNS:
        return SymbolCategory.SIGNS
    if symbol in AXIS_KEYS:
        return SymbolCategory.AXIS
    return SymbolCategory.CUSPS


def cusp_key(number: int) -> SymbolKey:
    """Return the numeral key for house ``number`` (1-12)."""

    if not 1 <= number <= 12:
        raise ValueError(f"house number must be between 1 and 12, got {number}")
    return CUSP_KEYS[number - 1]


__all__ = [
    "SymbolCategory",
    "SymbolKey",
    "POINT_KEYS",
    "ZODIAC_SIGNS",
    "AXIS_KEYS",
    "CUSP_KEYS",
    "DEFAULT_SYMBOL_NAMES",
    "category_of",
    "cusp_key",
]
