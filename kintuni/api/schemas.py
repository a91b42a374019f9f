"""Pydantic request and response models for the chart API."""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

__all__ = [
    "SymbolInfo",
    "SymbolListResponse",
    "SymbolRequest",
    "RadixRequest",
]


class SymbolInfo(BaseModel):
    key: str = Field(..., description="Canonical symbol key, e.g. 'sun' or 'cusp_1'.")
    name: str = Field(..., description="Symbol name accepted by the drawing endpoints.")
    category: str = Field(..., description="Glyph family: points, signs, cusps or axis.")


class SymbolListResponse(BaseModel):
    symbols: List[SymbolInfo]


class SymbolRequest(BaseModel):
    name: str = Field(..., min_length=1)
    x: float = 50.0
    y: float = 50.0
    width: float = Field(default=100.0, gt=0.0, le=4096.0)
    height: float = Field(default=100.0, gt=0.0, le=4096.0)
    settings: Dict[str, Any] | None = Field(
        default=None, description="Chart settings overriding the service defaults."
    )


class RadixRequest(BaseModel):
    planets: Dict[str, List[float]] = Field(default_factory=dict)
    cusps: List[float] = Field(..., min_length=12, max_length=12)
    width: float = Field(default=600.0, gt=0.0, le=4096.0)
    height: float = Field(default=600.0, gt=0.0, le=4096.0)
    aspects: bool = True
    settings: Dict[str, Any] | None = Field(
        default=None, description="Chart settings overriding the service defaults."
    )
