"""Runtime configuration for the chart API service.

Chart styling is persisted separately (see :mod:`kintuni.config.settings`);
this module only covers how the HTTP process itself is run.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

__all__ = ["APISettings", "settings", "get_settings"]

_TRUTHY = frozenset({"1", "true", "yes", "on"})

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_GZIP_MIN_SIZE = 512


def _env_flag(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(env.get(name, default))
    except (TypeError, ValueError):
        return default


def _split_origins(raw: str | None) -> tuple[str, ...]:
    # Order is kept; repeated and blank entries are dropped.
    origins: dict[str, None] = {}
    for item in (raw or "").split(","):
        item = item.strip()
        if item:
            origins.setdefault(item)
    return tuple(origins)


@dataclass(slots=True)
class APISettings:
    """Host, port and middleware options read from ``KINTUNI_*`` variables."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    reload: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: tuple[str, ...] = ()
    gzip_minimum_size: int = DEFAULT_GZIP_MIN_SIZE

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "APISettings":
        env = os.environ if env is None else env
        return cls(
            host=env.get("KINTUNI_API_HOST", DEFAULT_HOST),
            port=_env_int(env, "KINTUNI_API_PORT", DEFAULT_PORT),
            reload=_env_flag(env, "KINTUNI_API_RELOAD"),
            log_level=env.get("KINTUNI_API_LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
            cors_origins=_split_origins(env.get("KINTUNI_CORS_ORIGINS")),
            gzip_minimum_size=_env_int(env, "KINTUNI_GZIP_MIN_SIZE", DEFAULT_GZIP_MIN_SIZE),
        )


@lru_cache(maxsize=1)
def get_settings() -> APISettings:
    return APISettings.from_env()


settings: APISettings = get_settings()
