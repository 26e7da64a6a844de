"""
Configuration — observer location, display defaults, time and controls.

Read from the first of:
    $SKYTERM_CONFIG
    $XDG_CONFIG_HOME/skyterm/config.yaml
    ~/.config/skyterm/config.yaml

Example file::

    location:
      latitude: 44.80
      longitude: 10.33
      altitude: 55
      name: Parma
    display:
      magnitude_limit: 4.5
      show_coordinate_grid: true
    time:
      time_step: 10m
    controls:
      pan_speed: 5
      fast_pan_multiplier: 4
      zoom_step: 1.2

Each section is merged key by key over the defaults, so a file only needs
the keys it changes. A missing file means defaults; a file that is not
valid YAML, or has a value of the wrong type, raises ConfigError.
"""

from __future__ import annotations
import logging
import os
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from typing import Any, ClassVar, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .core.time_controller import parse_time_step
from .core.types import Observer
from .errors import ConfigError

log = logging.getLogger(__name__)

ENV_CONFIG = "SKYTERM_CONFIG"
CONFIG_DIRNAME = "skyterm"
CONFIG_FILENAME = "config.yaml"


class _Section(BaseModel):
    """A config section: frozen, strictly typed, unknown keys warned about and dropped."""

    model_config = ConfigDict(frozen=True, strict=True)

    section: ClassVar[str] = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_unknown_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        for key in data.keys() - known.keys():
            log.warning("ignoring unknown config key %s.%s", cls.section, key)
        return known


class LocationConfig(_Section):
    section: ClassVar[str] = "location"

    latitude: float = Field(40.7128, ge=-90.0, le=90.0)
    longitude: float = Field(-74.0060, ge=-180.0, le=180.0)
    altitude: float = 10.0
    name: str = "New York City"


class DisplayConfig(_Section):
    section: ClassVar[str] = "display"

    magnitude_limit: float = 5.0
    show_constellation_lines: bool = False
    show_constellation_names: bool = False
    show_coordinate_grid: bool = False
    show_planet_labels: bool = False
    show_star_labels: bool = False
    show_deep_sky: bool = True
    color_stars_by_type: bool = True
    use_braille_rendering: bool = False


class TimeConfig(_Section):
    section: ClassVar[str] = "time"

    use_utc: bool = False
    time_step: str = "1m"

    @field_validator("time_step", mode="before")
    @classmethod
    def _check_time_step(cls, value: Any) -> Any:
        # "time_step: 30" in YAML arrives as an int
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            parse_time_step(value)
        return value

    @property
    def step(self) -> timedelta:
        return parse_time_step(self.time_step)


class ControlsConfig(_Section):
    section: ClassVar[str] = "controls"

    pan_speed: float = Field(5.0, gt=0.0)
    fast_pan_multiplier: float = Field(4.0, gt=0.0)
    zoom_step: float = Field(1.2, gt=1.0)


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: LocationConfig = Field(default_factory=LocationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    time: TimeConfig = Field(default_factory=TimeConfig)
    controls: ControlsConfig = Field(default_factory=ControlsConfig)

    @model_validator(mode="before")
    @classmethod
    def _sections(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        out = {}
        for key, value in data.items():
            if key not in cls.model_fields:
                log.warning("ignoring unknown config section %s", key)
            elif value is not None:
                # An empty section ("display:") means defaults.
                out[key] = value
        return out

    def observer(self) -> Observer:
        loc = self.location
        return Observer(loc.latitude, loc.longitude, loc.altitude, loc.name)

    def display_tz(self) -> tzinfo:
        """Zone for event times: UTC, or the local zone unless use_utc is set."""
        if self.time.use_utc:
            return timezone.utc
        return datetime.now().astimezone().tzinfo

    def to_dict(self) -> dict:
        return self.model_dump()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{where}: {err['msg']}")
    return "; ".join(parts)


def config_from_mapping(data: Optional[Mapping[str, Any]]) -> Config:
    if data is None:
        return Config()
    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_describe(exc)) from exc


def default_config_path() -> Path:
    env = os.environ.get(ENV_CONFIG)
    if env:
        return Path(env).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / CONFIG_DIRNAME / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Config:
    path = Path(path) if path is not None else default_config_path()
    if not path.is_file():
        log.warning("no config file at %s, using defaults", path)
        return Config()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    cfg = config_from_mapping(data)
    log.info("loaded config from %s", path)
    return cfg


def save_config(cfg: Config, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(cfg.to_dict(), sort_keys=False), encoding="utf-8")
