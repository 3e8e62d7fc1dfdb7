# floodcast/core/forecaster.py
"""Extrapolation of the expected daily temperature.

Two models are available:

* **linear** – ``mean + slope * i`` for the forecast days i = 1…N;
* **seasonal** – the linear model plus three independent additive terms
  drawn fresh for every day:

  - a sinusoid of amplitude 5 °C and period 365 days, phased by
    ``(anchor_day + i) mod 365``;
  - a uniform daily variation in ±2 °C;
  - a uniform "weather system" variation in ±1.5 °C.

No autocorrelation between days is modelled.  The random source is a
``numpy.random.Generator`` passed in by the caller; the module keeps no
generator of its own, so two runs seeded alike give identical
sequences.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from ..constants import (
    DAILY_VARIATION,
    DAYS_PER_YEAR,
    SEASONAL_AMPLITUDE,
    WEATHER_SYSTEM_VARIATION,
)
from ..domain.forecast import ForecastPoint
from ..domain.historical import HistoricalStats
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


def _check_horizon(horizon: int) -> None:
    if horizon <= 0:
        raise InvalidInputError(f"Forecast horizon must be positive, got {horizon}")


def seasonal_offset(anchor_day: int, day: int) -> float:
    """Seasonal deviation (°C) of forecast day ``day`` after ``anchor_day``."""
    phase = (anchor_day + day) % DAYS_PER_YEAR
    return SEASONAL_AMPLITUDE * math.sin(2.0 * math.pi * phase / DAYS_PER_YEAR)


def predict_linear(mean: float, slope: float, horizon: int) -> List[float]:
    """Pure trend extrapolation."""
    _check_horizon(horizon)
    return [mean + slope * i for i in range(1, horizon + 1)]


def predict_seasonal(
    mean: float,
    slope: float,
    horizon: int,
    anchor_day: int,
    rng: np.random.Generator,
) -> List[float]:
    """Trend extrapolation with seasonal cycle and random daily noise."""
    _check_horizon(horizon)
    temps: List[float] = []
    for i in range(1, horizon + 1):
        base = mean + slope * i
        daily = rng.uniform(-DAILY_VARIATION, DAILY_VARIATION)
        system = rng.uniform(-WEATHER_SYSTEM_VARIATION, WEATHER_SYSTEM_VARIATION)
        temps.append(base + seasonal_offset(anchor_day, i) + daily + system)
    return temps


class TemperatureForecaster:
    """Turns historical statistics into a list of :class:`ForecastPoint`.

    ``seasonal=False`` selects the linear model; in that case no random
    source is needed.
    """

    def __init__(self, seasonal: bool = True) -> None:
        self.seasonal = seasonal

    def forecast(
        self,
        stats: HistoricalStats,
        horizon: int,
        anchor_day: int = 1,
        rng: Optional[np.random.Generator] = None,
    ) -> List[ForecastPoint]:
        if self.seasonal:
            if rng is None:
                raise InvalidInputError("The seasonal model needs a random generator")
            temps = predict_seasonal(
                stats.mean_temperature,
                stats.temperature_trend,
                horizon,
                anchor_day,
                rng,
            )
        else:
            temps = predict_linear(stats.mean_temperature, stats.temperature_trend, horizon)

        logger.debug(
            "forecast (%s): %d days, mean %.2f °C",
            "seasonal" if self.seasonal else "linear",
            horizon,
            sum(temps) / len(temps),
        )
        return [ForecastPoint(day=i, temperature=t) for i, t in enumerate(temps, start=1)]
