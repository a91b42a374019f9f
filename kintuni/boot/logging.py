"""Logging setup shared by the Kintuni entry points."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

__all__ = ["configure_logging", "resolve_level"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Checked in order; the first one set wins.
LEVEL_ENV_VARS = ("KINTUNI_LOG_LEVEL", "LOG_LEVEL")


def resolve_level(value: str | int | None, default: int = logging.INFO) -> int:
    """Turn a level name or number into a numeric logging level.

    Unrecognised values resolve to ``default`` rather than failing start-up.
    """

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return default
    if text.isdigit():
        return int(text)
    named = logging.getLevelName(text.upper())
    return named if isinstance(named, int) else default


def _level_from_env() -> str | None:
    for name in LEVEL_ENV_VARS:
        raw = os.environ.get(name)
        if raw:
            return raw
    return None


def configure_logging(
    *,
    level: str | int | None = None,
    logger_levels: Mapping[str, str | int] | None = None,
    **basic_config: Any,
) -> int:
    """Install the root handler and return the level applied to it.

    ``level`` falls back to ``KINTUNI_LOG_LEVEL`` then ``LOG_LEVEL``.
    ``logger_levels`` pins individual loggers (for example the renderer's
    DEBUG chatter) independently of the root level.
    """

    root_level = resolve_level(level if level is not None else _level_from_env())
    basic_config.setdefault("format", LOG_FORMAT)
    basic_config.setdefault("datefmt", LOG_DATEFMT)
    basic_config.setdefault("force", True)
    logging.basicConfig(level=root_level, **basic_config)

    for name, value in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(resolve_level(value, default=root_level))
    return root_level
