# floodcast/domain/historical.py
"""Archived observations and the statistics derived from them.

**HistoricalSample** holds the concatenated hourly readings of several
past years, each covering a window of a few days around the forecast
date.  Both series are ordered by time; the moisture series may be empty
when the archive has no soil data for the location.

**HistoricalStats** is the compact summary used by the temperature
forecaster and for seeding the initial soil moisture.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class HistoricalSample:
    """Hourly temperature (°C) and soil moisture (%) readings."""

    temperatures: Tuple[float, ...]
    moisture: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any sequence, store tuples
        object.__setattr__(self, "temperatures", tuple(float(t) for t in self.temperatures))
        object.__setattr__(self, "moisture", tuple(float(m) for m in self.moisture))


@dataclass(frozen=True, slots=True)
class HistoricalStats:
    """Mean level and linear trend of the historical temperatures."""

    mean_temperature: float           # °C
    temperature_trend: float          # °C per sample step
    mean_moisture: Optional[float]    # %, None when no moisture was supplied
    sample_count: int
