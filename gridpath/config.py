"""Configuration for the gridpath command line."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridpath.search.contracts import Coord

CONFIG_ENV = "GRIDPATH_CONFIG"
WIDTH_ENV = "GRIDPATH_WIDTH"
HEIGHT_ENV = "GRIDPATH_HEIGHT"
LOG_LEVEL_ENV = "GRIDPATH_LOG_LEVEL"

DEFAULT_WIDTH = 36
DEFAULT_HEIGHT = 30
DEFAULT_LATTICE_SPACING = 4
DEFAULT_LOG_LEVEL = "WARNING"


class GridPathConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)
    lattice_spacing: int = Field(default=DEFAULT_LATTICE_SPACING, ge=0)
    obstacles: list[Coord] = Field(default_factory=list)
    start: Coord | None = None
    goal: Coord | None = None
    map_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(
    path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> GridPathConfig:
    """Merge defaults, environment, a JSON config file and ``overrides``.

    Later sources win. ``None`` values in ``overrides`` are ignored so
    unset command line flags fall through.
    """
    data: dict[str, Any] = _env_values()
    config_path = path or _env_path()
    if config_path is not None:
        data.update(_load_json(config_path))
    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})
    return GridPathConfig.model_validate(data)


def _env_values() -> dict[str, Any]:
    env_keys = {
        "width": WIDTH_ENV,
        "height": HEIGHT_ENV,
        "log_level": LOG_LEVEL_ENV,
    }
    values: dict[str, Any] = {}
    for key, env_name in env_keys.items():
        value = os.getenv(env_name)
        if value:
            values[key] = value
    return values


def _env_path() -> Path | None:
    value = os.getenv(CONFIG_ENV)
    return Path(value) if value else None


def _load_json(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing config file: {path}") from exc
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object.")
    return data
