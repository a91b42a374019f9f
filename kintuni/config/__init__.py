"""Configuration helpers exposed at :mod:`kintuni.config`."""

from __future__ import annotations

from .settings import (
    AspectStyle,
    ChartSettings,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "AspectStyle",
    "ChartSettings",
    "Settings",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
