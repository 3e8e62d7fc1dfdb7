# floodcast/core/weather_generator.py
"""Synthetic daily rainfall from a simplified seasonal regime.

Each calendar month maps to a pair *(rain chance, maximum rainfall)*
describing a northern-hemisphere climate with a wet spring/early summer
and a drier winter.  For every day the generator

1. looks up the month of the day-of-year (30-day months, December
   absorbs the remainder of the year);
2. rains with probability ``rain_chance``, the amount being uniform in
   ``[0, rain_max)`` mm.

Temperature is left at the 0.0 placeholder; the orchestrator fills it
from the temperature forecast.

:func:`apply_extreme_event` optionally overlays a rare storm burst or
heat excursion on a finished sample.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Tuple

import numpy as np

from ..constants import (
    DAYS_PER_YEAR,
    EXTREME_EVENT_PROBABILITY,
    HEAT_EXCURSION_RANGE,
    STORM_RAIN_RANGE,
)
from ..domain.weather import WeatherSample
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

# month → (rain chance 0…1, max rainfall mm)
MONTHLY_RAIN: Dict[int, Tuple[float, float]] = {
    1: (0.3, 20.0),
    2: (0.4, 25.0),
    3: (0.5, 40.0),
    4: (0.6, 50.0),
    5: (0.7, 60.0),
    6: (0.3, 70.0),
    7: (0.2, 60.0),
    8: (0.3, 50.0),
    9: (0.4, 40.0),
    10: (0.5, 45.0),
    11: (0.5, 35.0),
    12: (0.4, 30.0),
}


def month_of_day(day_of_year: int) -> int:
    """Month 1…12 for a 1-based day-of-year."""
    month = ((day_of_year - 1) % DAYS_PER_YEAR) // 30 + 1
    return min(12, max(1, month))


def generate_day(rng: np.random.Generator, day_of_year: int) -> WeatherSample:
    """Draw the rainfall of a single day."""
    rain_chance, rain_max = MONTHLY_RAIN[month_of_day(day_of_year)]
    if rng.random() < rain_chance:
        rainfall = rng.random() * rain_max
    else:
        rainfall = 0.0
    return WeatherSample(rainfall=rainfall, temperature=0.0)


def generate_weather(
    rng: np.random.Generator,
    days: int,
    start_day: int,
) -> List[WeatherSample]:
    """Rainfall for ``days`` consecutive days starting at ``start_day``."""
    if days <= 0:
        raise InvalidInputError(f"Number of days must be positive, got {days}")
    samples = [generate_day(rng, start_day + offset) for offset in range(days)]
    logger.debug(
        "generated %d days from day %d: %d wet, %.1f mm total",
        days,
        start_day,
        sum(1 for s in samples if s.rainfall > 0),
        sum(s.rainfall for s in samples),
    )
    return samples


def apply_extreme_event(sample: WeatherSample, rng: np.random.Generator) -> WeatherSample:
    """Overlay at most one extreme event on ``sample``.

    A single uniform draw decides: the lower 5 % tail adds a storm burst,
    the upper 5 % tail a heat excursion, anything in between leaves the
    sample untouched.
    """
    u = rng.random()
    if u < EXTREME_EVENT_PROBABILITY:
        burst = rng.uniform(*STORM_RAIN_RANGE)
        logger.debug("storm burst +%.1f mm", burst)
        return replace(sample, rainfall=sample.rainfall + burst)
    if u >= 1.0 - EXTREME_EVENT_PROBABILITY:
        heat = rng.uniform(*HEAT_EXCURSION_RANGE)
        logger.debug("heat excursion +%.1f °C", heat)
        return replace(sample, temperature=sample.temperature + heat)
    return sample
