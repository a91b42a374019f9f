"""Configuration models and helpers for chart rendering settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kintuni.viz.core.symbols import DEFAULT_SYMBOL_NAMES, SymbolKey

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2
CONFIG_FILENAME = "config.yaml"

# Legacy flat payloads spell symbol names as ``SYMBOL_<KEY>``.
_LEGACY_SYMBOL_PREFIX = "SYMBOL_"

# -------------------- Settings Schema --------------------


class AspectStyle(BaseModel):
    """Angle, orb and line colour of one aspect drawn on the chart."""

    model_config = ConfigDict(frozen=True)

    degree: float = Field(ge=0.0, le=180.0)
    orbit: float = Field(ge=0.0)
    color: str


def _default_aspects() -> Dict[str, AspectStyle]:
    return {
        "conjunction": AspectStyle(degree=0, orbit=10, color="transparent"),
        "square": AspectStyle(degree=90, orbit=8, color="#FF4500"),
        "trine": AspectStyle(degree=120, orbit=8, color="#27AE60"),
        "opposition": AspectStyle(degree=180, orbit=10, color="#696969"),
        "sextile": AspectStyle(degree=60, orbit=10, color="#0000CD"),
        "semisextile": AspectStyle(degree=30, orbit=10, color="#89E0FF"),
    }


def _default_sign_colors() -> List[str]:
    return ["#F08080", "#F5F5DC", "#F0FFF0", "#E0FFFF"] * 3


class ChartSettings(BaseModel):
    """Styling and naming used by every drawing call.

    Instances are immutable for the duration of a render.  Field names are
    snake_case; the UPPER_CASE names used by older chart payloads
    (``SYMBOL_SCALE``, ``POINTS_COLOR`` ...) are accepted as aliases, and
    ``SYMBOL_SUN`` style keys are folded into :attr:`symbol_names`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol_scale: float = Field(default=1.0, gt=0.0, alias="SYMBOL_SCALE")

    points_color: str = Field(default="#000", alias="POINTS_COLOR")
    points_stroke: float = Field(default=1.8, ge=0.0, alias="POINTS_STROKE")
    signs_color: str = Field(default="#000", alias="SIGNS_COLOR")
    signs_stroke: float = Field(default=1.5, ge=0.0, alias="SIGNS_STROKE")
    cusps_font_color: str = Field(default="#000", alias="CUSPS_FONT_COLOR")
    cusps_stroke: float = Field(default=1.0, ge=0.0, alias="CUSPS_STROKE")
    symbol_axis_font_color: str = Field(default="#333", alias="SYMBOL_AXIS_FONT_COLOR")
    symbol_axis_stroke: float = Field(default=1.6, ge=0.0, alias="SYMBOL_AXIS_STROKE")

    add_click_area: bool = Field(default=False, alias="ADD_CLICK_AREA")
    custom_symbol_fn: Optional[Callable[..., Any]] = Field(
        default=None,
        alias="CUSTOM_SYMBOL_FN",
        exclude=True,
        description="Override hook called as fn(name, x, y, paper) before the built-in glyphs.",
    )

    symbol_names: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SYMBOL_NAMES))

    id_chart: str = Field(default="astrology", alias="ID_CHART")
    id_radix: str = Field(default="radix", alias="ID_RADIX")
    id_signs: str = Field(default="signs", alias="ID_SIGNS")
    id_cusps: str = Field(default="cusps", alias="ID_CUSPS")
    id_points: str = Field(default="planets", alias="ID_POINTS")
    id_axis: str = Field(default="axis", alias="ID_AXIS")
    id_aspects: str = Field(default="aspects", alias="ID_ASPECTS")

    shift_in_degrees: float = Field(default=180.0, alias="SHIFT_IN_DEGREES")

    margin: float = Field(default=50.0, ge=0.0, alias="MARGIN")
    padding: float = Field(default=18.0, ge=0.0, alias="PADDING")
    inner_circle_radius_ratio: float = Field(default=8.0, gt=0.0, alias="INNER_CIRCLE_RADIUS_RATIO")
    indoor_circle_radius_ratio: float = Field(default=2.0, gt=0.0, alias="INDOOR_CIRCLE_RADIUS_RATIO")
    circle_color: str = Field(default="#333", alias="CIRCLE_COLOR")
    circle_strong: float = Field(default=2.0, ge=0.0, alias="CIRCLE_STRONG")
    line_color: str = Field(default="#333", alias="LINE_COLOR")
    colors_signs: List[str] = Field(default_factory=_default_sign_colors, alias="COLORS_SIGNS")
    aspects: Dict[str, AspectStyle] = Field(default_factory=_default_aspects, alias="ASPECTS")
    stroke_only: bool = Field(default=False, alias="STROKE_ONLY")
    collision_radius: float = Field(default=10.0, ge=0.0, alias="COLLISION_RADIUS")
    ruler_radius: float = Field(default=4.0, ge=0.0, alias="RULER_RADIUS")
    points_text_size: float = Field(default=8.0, gt=0.0, alias="POINTS_TEXT_SIZE")

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_symbol_names(cls, values: object) -> object:
        """Move ``SYMBOL_<KEY>`` entries into ``symbol_names``."""

        if not isinstance(values, dict):
            return values
        legacy = {
            key: value
            for key, value in values.items()
            if isinstance(key, str)
            and key.startswith(_LEGACY_SYMBOL_PREFIX)
            and key != "SYMBOL_SCALE"
            and not key.startswith("SYMBOL_AXIS_")
        }
        if not legacy:
            return values
        values = {key: value for key, value in values.items() if key not in legacy}
        names = dict(values.get("symbol_names") or DEFAULT_SYMBOL_NAMES)
        for key, value in legacy.items():
            names[key[len(_LEGACY_SYMBOL_PREFIX):].lower()] = value
        values["symbol_names"] = names
        return values

    @field_validator("symbol_names")
    @classmethod
    def _require_every_symbol(cls, value: Dict[str, str]) -> Dict[str, str]:
        known = {key.value for key in SymbolKey}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(f"unknown symbol keys: {', '.join(unknown)}")
        missing = [key.value for key in SymbolKey if key.value not in value]
        if missing:
            raise ValueError(f"symbol_names is missing entries for: {', '.join(missing)}")
        seen: Dict[str, str] = {}
        for key, name in value.items():
            if not name:
                raise ValueError(f"symbol name for '{key}' must not be empty")
            if name in seen:
                raise ValueError(f"symbol name '{name}' is used by both '{seen[name]}' and '{key}'")
            seen[name] = key
        return value

    @field_validator("colors_signs")
    @classmethod
    def _twelve_sign_colors(cls, value: List[str]) -> List[str]:
        if len(value) != 12:
            raise ValueError(f"colors_signs needs exactly 12 colours, got {len(value)}")
        return value

    def name_for(self, key: SymbolKey | str) -> str:
        """Caller-facing symbol name configured for ``key``."""

        return self.symbol_names[SymbolKey(key).value]


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    chart: ChartSettings = Field(default_factory=ChartSettings)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Directory holding ``config.yaml``; ``KINTUNI_HOME`` overrides ``~/.kintuni``."""

    override = os.environ.get("KINTUNI_HOME")
    return Path(override) if override else Path.home() / ".kintuni"


def config_path() -> Path:
    """Path of the settings file, creating its directory on first use."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML and return the file written.

    The override hook is not serialisable and is left out.
    """

    target = Path(path) if path else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    return target


def _schema_version_of(payload: Mapping[str, Any]) -> int:
    # Files written before the marker existed count as version 1.
    try:
        return max(1, int(payload.get("schema_version", 1)))
    except (TypeError, ValueError):
        return 1


def _upgrade_settings_payload(payload: Mapping[str, Any]) -> tuple[dict[str, Any], bool]:
    """Bring a stored payload up to :data:`CURRENT_SETTINGS_SCHEMA_VERSION`.

    Returns the upgraded mapping and whether anything changed.
    """

    version = _schema_version_of(payload)
    data = deepcopy(dict(payload))

    if version < 2:
        # Version 1 stored the chart options at the top level.
        chart = {key: value for key, value in data.items() if key not in ("schema_version", "chart")}
        if isinstance(data.get("chart"), dict):
            chart.update(data["chart"])
        data = {"chart": chart}

    target = max(version, CURRENT_SETTINGS_SCHEMA_VERSION)
    changed = data.get("schema_version") != target
    data["schema_version"] = target
    return data, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from ``path`` (default :func:`config_path`).

    A missing file is created with defaults.  Older payloads are upgraded
    and written back so the upgrade only happens once.
    """

    source = Path(path) if path else config_path()
    if not source.exists():
        return _write_defaults(source)

    raw = yaml.safe_load(source.read_text(encoding="utf-8"))
    data, upgraded = _upgrade_settings_payload(raw if isinstance(raw, dict) else {})
    settings = Settings.model_validate(data)
    if upgraded:
        LOG.info("Upgraded settings at %s to schema version %s", source, settings.schema_version)
        save_settings(settings, source)
    return settings


def _write_defaults(target: Path) -> Settings:
    settings = default_settings()
    save_settings(settings, target)
    return settings


def ensure_default_config() -> Path:
    """Create ``config.yaml`` with defaults unless it exists; return its path."""

    target = config_path()
    if not target.exists():
        _write_defaults(target)
    return target


__all__ = [
    "AspectStyle",
    "ChartSettings",
    "Settings",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "CONFIG_FILENAME",
    "get_config_home",
    "config_path",
    "default_settings",
    "save_settings",
    "load_settings",
    "ensure_default_config",
]
