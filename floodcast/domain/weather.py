# floodcast/domain/weather.py
"""Daily atmospheric input of the river simulation.

One **WeatherSample** describes a single day:

* **rainfall** – precipitation total, mm (never negative);
* **temperature** – mean air temperature, °C.

The weather generator only draws rainfall and leaves ``temperature`` at
the 0.0 placeholder; the orchestrator overwrites it with the forecast
temperature before the sample reaches the simulator.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeatherSample:
    """Rainfall and temperature of one day."""

    rainfall: float           # mm
    temperature: float = 0.0  # °C

    def __post_init__(self) -> None:
        if self.rainfall < 0:
            raise ValueError(f"Rainfall must be non-negative, got {self.rainfall}")
