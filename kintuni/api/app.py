"""ASGI application serving chart glyphs and natal wheels."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from kintuni import __version__
from kintuni.boot.logging import configure_logging
from kintuni.config import Settings, default_settings, load_settings

from .errors import install_error_handlers
from .routers import charts, health
from .settings import APISettings, get_settings

LOGGER = logging.getLogger(__name__)

configure_logging()

OPENAPI_TAGS = [
    {"name": "system", "description": "Service level operations."},
    {"name": "charts", "description": "Chart glyph and natal wheel rendering."},
]

_APP_INSTANCE: FastAPI | None = None


def _load_chart_settings(path: Path | None) -> Settings:
    """Read persisted chart styling; a broken file must not stop the service."""

    try:
        return load_settings(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        LOGGER.warning("Failed to load chart settings; using defaults: %s", exc)
        return default_settings()


def create_app(
    api_settings: APISettings | None = None,
    *,
    settings_path: Path | None = None,
) -> FastAPI:
    """Build the chart service.

    Chart settings are loaded when the application starts, so a changed
    ``config.yaml`` is picked up on restart without rebuilding the app.
    """

    runtime = api_settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.settings = _load_chart_settings(settings_path)
        LOGGER.info("Kintuni chart API %s ready", __version__)
        yield

    app = FastAPI(
        title="Kintuni Chart API",
        version=__version__,
        default_response_class=ORJSONResponse,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.api_settings = runtime

    app.add_middleware(GZipMiddleware, minimum_size=runtime.gzip_minimum_size)
    if runtime.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(runtime.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    install_error_handlers(app)
    app.include_router(health.router)
    app.include_router(charts.router)
    return app


def get_app() -> FastAPI:
    global _APP_INSTANCE
    if _APP_INSTANCE is None:
        _APP_INSTANCE = create_app()
    return _APP_INSTANCE


app = get_app()


def run() -> None:  # pragma: no cover - integration entry point
    """Serve :data:`app` with uvicorn using the ``KINTUNI_API_*`` settings."""

    import uvicorn

    runtime = get_settings()
    uvicorn.run(
        "kintuni.api.app:app",
        host=runtime.host,
        port=runtime.port,
        log_level=runtime.log_level,
        reload=runtime.reload,
    )


__all__ = ["app", "create_app", "get_app", "run"]
