"""Liveness probe for the chart service."""

from __future__ import annotations

from fastapi import APIRouter

from kintuni import __version__

from ...viz.core.glyphs import default_catalog

router = APIRouter(tags=["system"])


@router.get(
    "/healthz",
    summary="Service readiness probe",
    response_model=dict[str, str | int],
)
async def health_check() -> dict[str, str | int]:
    """Report the package version and how many glyphs the renderer can draw."""

    return {"status": "ok", "version": __version__, "glyphs": len(default_catalog())}


__all__ = ["router"]
