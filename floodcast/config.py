# floodcast/config.py
"""Run-wide parameters supplied from outside the forecasting core.

Values come from the environment (optionally a ``.env`` file loaded with
python-dotenv) with the ``FLOODCAST_`` prefix; anything not set falls
back to the defaults below.  Explicit keyword overrides win over both::

    settings = Settings.from_env(forecast_days=7)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from .core import calibration as calibrations

ENV_PREFIX = "FLOODCAST_"


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Simulation horizon, initial conditions, fallbacks and HTTP options."""

    forecast_days: int = 14
    initial_level: float = 2.0            # m
    max_capacity: float = 10.0            # m
    calibration: str = "standard"

    # used when geocoding / the weather archive is unavailable
    default_latitude: float = 47.5
    default_longitude: float = 19.0
    default_temperature: float = 20.0     # °C
    default_moisture: float = 50.0        # %

    # historical moisture is clamped into this band for the initial soil
    min_initial_moisture: float = 20.0
    max_initial_moisture: float = 80.0

    seasonal: bool = True
    extreme_events: bool = False

    history_years: int = 5
    window_days: int = 3

    request_timeout: float = 30.0         # s
    user_agent: str = "floodcast/0.1"

    def __post_init__(self) -> None:
        if self.forecast_days <= 0:
            raise ValueError(f"forecast_days must be positive, got {self.forecast_days}")
        if self.max_capacity <= 0:
            raise ValueError(f"max_capacity must be positive, got {self.max_capacity}")
        if not 0.0 <= self.initial_level <= self.max_capacity:
            raise ValueError(
                f"initial_level {self.initial_level} outside 0..{self.max_capacity}"
            )
        if not 0.0 <= self.min_initial_moisture <= self.max_initial_moisture <= 100.0:
            raise ValueError("Initial moisture band must satisfy 0 <= min <= max <= 100")
        if self.history_years <= 0 or self.window_days < 0:
            raise ValueError("history_years must be positive and window_days non-negative")
        calibrations.get(self.calibration)

    @property
    def river_calibration(self) -> calibrations.Calibration:
        return calibrations.get(self.calibration)

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Copy with the non-``None`` keyword arguments applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides: Any) -> "Settings":
        load_dotenv(env_file)
        converters: Dict[type, Callable[[str], Any]] = {
            int: int,
            float: float,
            str: str,
            bool: _parse_bool,
        }
        values: Dict[str, Any] = {}
        defaults = cls()
        for f in fields(cls):
            raw = os.getenv(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            kind = type(getattr(defaults, f.name))
            try:
                values[f.name] = converters[kind](raw)
            except ValueError as exc:
                raise ValueError(f"Invalid value for {ENV_PREFIX}{f.name.upper()}: {exc}") from exc
        return cls(**values).with_overrides(**overrides)
