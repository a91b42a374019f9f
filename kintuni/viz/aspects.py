from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from kintuni.config.settings import AspectStyle

from .core.geometry import angular_distance

# --------------------------- Aspects (public helper) -----------------------


@dataclass(frozen=True)
class AspectHit:
    a: str
    b: str
    aspect: str
    angle: float
    delta: float
    orb: float
    color: str


def find_aspects(
    positions: Mapping[str, float],
    aspects: Mapping[str, AspectStyle],
) -> list[AspectHit]:
    """Return the tightest configured aspect for every pair of points.

    ``positions`` maps point names to ecliptic longitudes.  A pair forms an
    aspect when its angular separation is within ``orbit / 2`` of the
    aspect ``degree``.  Hits are ordered by orb, then by point names.
    """

    names = list(positions.keys())
    hits: list[AspectHit] = []
    for i, a in enumerate(names):
        for j in range(i + 1, len(names)):
            b = names[j]
            delta = angular_distance(positions[a], positions[b])
            best: AspectHit | None = None
            for name, style in aspects.items():
                orb = abs(delta - float(style.degree))
                if orb <= style.orbit / 2 + 1e-9:
                    cand = AspectHit(
                        a=a,
                        b=b,
                        aspect=name,
                        angle=float(style.degree),
                        delta=float(delta),
                        orb=float(orb),
                        color=style.color,
                    )
                    if best is None or cand.orb < best.orb:
                        best = cand
            if best:
                hits.append(best)
    hits.sort(key=lambda h: (h.orb, h.a, h.b))
    return hits


__all__ = ["AspectHit", "find_aspects"]
