# floodcast/core/river_simulator.py
"""Day-by-day simulation of a river and the soil of its catchment.

* Input:
  - the initial river state (level, capacity) and soil moisture,
  - the daily weather (rainfall) of the horizon,
  - the forecast temperature of every day,
  - a :class:`~floodcast.core.calibration.Calibration` preset.
* Output: one ``(RiverState, FloodWarning)`` pair per simulated day,
  oldest first.

One transition step:

1. runoff coefficient = clamp(moisture / 100, 0.1, 0.9);
2. inflow = rainfall × runoff × inflow_scale on wet days, a small
   moisture-driven baseflow on dry days;
3. outflow = level × decay_rate, ×1.5 above 80 % and ×1.2 above 50 % of
   capacity (faster drainage at high head);
4. new level = clamp(level + inflow − outflow, floor, capacity);
5. soil moisture += rainfall × 0.1 − max(0, temperature × 0.03),
   clamped to 0…100;
6. the new level is classified (:mod:`floodcast.core.risk`).

The river and soil updates both start from the state at the beginning of
the day.  The transition is deterministic: all randomness lives in the
weather generator and the temperature forecaster, which run before the
simulation.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, NamedTuple, Sequence

from ..constants import (
    EVAPORATION_PER_DEGREE,
    HIGH_HEAD_FRACTION,
    HIGH_HEAD_OUTFLOW_FACTOR,
    INFILTRATION_PER_MM,
    MAX_MOISTURE,
    MAX_RUNOFF,
    MID_HEAD_FRACTION,
    MID_HEAD_OUTFLOW_FACTOR,
    MIN_MOISTURE,
    MIN_RUNOFF,
)
from ..domain.river import RiverState, SoilCondition
from ..domain.warning import FloodWarning
from ..domain.weather import WeatherSample
from .calibration import Calibration, STANDARD
from .risk import classify_state

logger = logging.getLogger(__name__)


class DayResult(NamedTuple):
    """River state at the end of a day and its risk class."""

    river: RiverState
    warning: FloodWarning


# ---------------------------------------------------------------------------
# Transition sub-steps
# ---------------------------------------------------------------------------


def runoff_coefficient(moisture: float) -> float:
    """Share of rainfall that reaches the river; wetter soil sheds more."""
    return min(MAX_RUNOFF, max(MIN_RUNOFF, moisture / 100.0))


def inflow(rainfall: float, moisture: float, calibration: Calibration) -> float:
    """Level gain (m) from rainfall, or baseflow on a dry day."""
    if rainfall > 0:
        return rainfall * runoff_coefficient(moisture) * calibration.inflow_scale
    return max(calibration.baseflow_min, moisture * calibration.baseflow_rate)


def outflow(river: RiverState, calibration: Calibration) -> float:
    """Level loss (m) by drainage."""
    if river.current_level > river.max_capacity * HIGH_HEAD_FRACTION:
        factor = HIGH_HEAD_OUTFLOW_FACTOR
    elif river.current_level > river.max_capacity * MID_HEAD_FRACTION:
        factor = MID_HEAD_OUTFLOW_FACTOR
    else:
        factor = 1.0
    return river.current_level * calibration.decay_rate * factor


def update_river_level(
    river: RiverState,
    weather: WeatherSample,
    soil: SoilCondition,
    calibration: Calibration = STANDARD,
) -> RiverState:
    """New river state after one day; the level stays within [floor, capacity]."""
    gain = inflow(weather.rainfall, soil.moisture, calibration)
    loss = outflow(river, calibration)
    level = max(calibration.level_floor, river.current_level + gain - loss)
    return replace(
        river,
        current_level=min(level, river.max_capacity),
        soil_moisture=soil.moisture,
    )


def update_soil_moisture(soil: SoilCondition, weather: WeatherSample) -> SoilCondition:
    """Infiltration minus temperature-driven evaporation."""
    evaporation = max(0.0, weather.temperature * EVAPORATION_PER_DEGREE)
    change = weather.rainfall * INFILTRATION_PER_MM - evaporation
    return SoilCondition(
        moisture=max(MIN_MOISTURE, min(MAX_MOISTURE, soil.moisture + change))
    )


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------


class RiverSimulator:
    """Runs the transition over a whole horizon.

    The simulator owns the (river, soil) chain during a run and is
    stateless between runs, so one instance may serve many requests.
    """

    def __init__(self, calibration: Calibration = STANDARD) -> None:
        self.calibration = calibration

    def step(
        self,
        river: RiverState,
        soil: SoilCondition,
        weather: WeatherSample,
    ) -> tuple[RiverState, SoilCondition, FloodWarning]:
        """Advance one day."""
        new_river = update_river_level(river, weather, soil, self.calibration)
        new_soil = update_soil_moisture(soil, weather)
        return new_river, new_soil, classify_state(new_river)

    def simulate(
        self,
        river: RiverState,
        soil: SoilCondition,
        weather: Sequence[WeatherSample],
        temperatures: Sequence[float],
    ) -> List[DayResult]:
        """Simulate ``min(len(weather), len(temperatures))`` days.

        The day's temperature replaces the placeholder of its weather
        sample.  Extra entries of the longer sequence are ignored.
        """
        if len(weather) != len(temperatures):
            logger.debug(
                "weather (%d) and temperatures (%d) differ in length; "
                "simulating the shorter",
                len(weather),
                len(temperatures),
            )
        logger.info(
            "Starting river simulation (%s): level=%.2f/%.2f m, moisture=%.1f %%",
            self.calibration.name,
            river.current_level,
            river.max_capacity,
            soil.moisture,
        )

        results: List[DayResult] = []
        for day, (sample, temp) in enumerate(zip(weather, temperatures), start=1):
            sample = replace(sample, temperature=temp)
            river, soil, warning = self.step(river, soil, sample)
            logger.debug(
                "day=%2d rain=%6.2f temp=%5.1f level=%.3f moisture=%5.1f %s",
                day,
                sample.rainfall,
                sample.temperature,
                river.current_level,
                soil.moisture,
                warning,
            )
            results.append(DayResult(river, warning))
        return results


def simulate(
    river: RiverState,
    soil: SoilCondition,
    weather: Sequence[WeatherSample],
    temperatures: Sequence[float],
    calibration: Calibration = STANDARD,
) -> List[DayResult]:
    """Functional shortcut for :meth:`RiverSimulator.simulate`."""
    return RiverSimulator(calibration).simulate(river, soil, weather, temperatures)
