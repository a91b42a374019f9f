"""API router modules for Kintuni."""

from __future__ import annotations

__all__ = ["charts", "health"]
