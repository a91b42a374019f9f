"""FastAPI router rendering chart glyphs and natal wheels as SVG."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import ORJSONResponse, Response
from pydantic import ValidationError

from ...config.settings import ChartSettings, Settings, default_settings
from ...viz.core.symbols import SymbolKey, category_of
from ...viz.paper import ChartPaper
from ...viz.radix import ChartData, render_radix_svg
from ..errors import validation_error_detail
from ..schemas import RadixRequest, SymbolInfo, SymbolListResponse, SymbolRequest

LOG = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

router = APIRouter(
    prefix="/v1/charts",
    tags=["charts"],
    default_response_class=ORJSONResponse,
)


def _base_settings(request: Request) -> ChartSettings:
    stored: Settings | None = getattr(request.app.state, "settings", None)
    return (stored or default_settings()).chart


def _chart_settings(request: Request, overrides: Mapping[str, Any] | None) -> ChartSettings:
    base = _base_settings(request)
    if not overrides:
        return base
    try:
        return ChartSettings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise HTTPException(
            status_code=422, detail=validation_error_detail(exc, "Invalid chart settings.")
        ) from exc


@router.get("/symbols", response_model=SymbolListResponse)
def list_symbols(request: Request) -> SymbolListResponse:
    chart = _base_settings(request)
    return SymbolListResponse(
        symbols=[
            SymbolInfo(key=key.value, name=chart.name_for(key), category=category_of(key).value)
            for key in SymbolKey
        ]
    )


@router.post("/symbol", response_class=Response)
def draw_symbol(payload: SymbolRequest, request: Request) -> Response:
    chart = _chart_settings(request, payload.settings)
    paper = ChartPaper.standalone(payload.width, payload.height, chart)
    paper.append(paper.get_symbol(payload.name, payload.x, payload.y))
    return Response(content=paper.to_string(), media_type=SVG_MEDIA_TYPE)


@router.post("/radix", response_class=Response)
def draw_radix(payload: RadixRequest, request: Request) -> Response:
    chart = _chart_settings(request, payload.settings)
    try:
        data = ChartData(planets=payload.planets, cusps=payload.cusps)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422, detail=validation_error_detail(exc, "Invalid chart data.")
        ) from exc
    LOG.debug("Rendering radix with %d points", len(data.planets))
    svg = render_radix_svg(
        data,
        payload.width,
        payload.height,
        chart,
        aspects=payload.aspects,
    )
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)


__all__ = ["router"]
