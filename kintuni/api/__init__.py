"""HTTP service exposing the chart renderer.

Import :mod:`kintuni.api.app` for the ASGI application; this package keeps
its own import light so helpers such as :mod:`kintuni.api.errors` can be
used without building the app.
"""

from __future__ import annotations

__all__ = ["create_app", "get_app"]


def create_app(*args, **kwargs):  # type: ignore[no-untyped-def]
    from .app import create_app as _create_app

    return _create_app(*args, **kwargs)


def get_app():  # type: ignore[no-untyped-def]
    from .app import get_app as _get_app

    return _get_app()
