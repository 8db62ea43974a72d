from __future__ import annotations

import json
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, ValidationError, field_validator

from . import canon, exceptions


class Paths(BaseModel):
    data: str = "./data.csv"
    stats: str | None = None


class Estimations(BaseModel):
    pellet_kg_power: float = Field(gt=0)  # kWh produced per kg of pellets
    pellet_kg_cost: float = Field(ge=0)  # EUR/kg
    last_fuel_level: float  # kg loaded at the start of the log


class OperatingHours(BaseModel):
    start: int = Field(ge=0, le=24)
    end: int = Field(ge=0, le=24)


class AnalyticsSettings(BaseModel):
    short_window_minutes: int = Field(default=canon.SHORT_WINDOW_MIN, gt=0)
    day_window_hours: int = Field(default=canon.DAY_WINDOW_HOURS, gt=0)
    smoothing_neighbours: int = Field(default=canon.SMOOTHING_NEIGHBOURS, ge=0)
    min_samples: int = Field(default=canon.MIN_SAMPLES, ge=0)
    power_min: float = canon.POWER_MIN_KW
    power_max: float = canon.POWER_MAX_KW
    chart_height: int = Field(default=canon.CHART_HEIGHT, gt=0)


class Config(BaseModel):
    paths: Paths = Field(default_factory=Paths)
    estimations: Estimations
    operating_hours: list[OperatingHours] = Field(default_factory=list)
    timezone: str = canon.DEFAULT_TZ
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    verbose: bool = False

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    def in_operation(self, hour: int) -> bool:
        """True when the hour of day falls inside any configured operating window."""
        return any(w.start <= hour < w.end for w in self.operating_hours)


def load_config(path: str | Path) -> Config:
    """Load and validate a JSON config file.

    Relative `paths.*` entries are resolved against the config file's folder.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise exceptions.ConfigError(f"Cannot read config '{path}': {e}") from e

    try:
        cfg = Config.model_validate(raw)
    except ValidationError as e:
        raise exceptions.ConfigError(f"Invalid config '{path}': {e}") from e

    base = path.parent
    cfg.paths.data = str(base / cfg.paths.data)
    if cfg.paths.stats:
        cfg.paths.stats = str(base / cfg.paths.stats)
    return cfg
