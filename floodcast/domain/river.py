# floodcast/domain/river.py
"""Hydrological state of the river and the soil of its catchment.

Both containers are immutable: the river simulator builds a new pair for
every simulated day instead of updating the old one, so a result list
keeps the full history of the run.

* **SoilCondition.moisture** – soil saturation, % (0…100).
* **RiverState.current_level** – water level, m (0…max_capacity).
* **RiverState.max_capacity** – bankfull level, m; constant during a run.
* **RiverState.soil_moisture** – copy of the soil moisture that drove
  the day's runoff, kept for reporting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SoilCondition:
    """Soil moisture in percent."""

    moisture: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.moisture <= 100.0:
            raise ValueError(f"Soil moisture must be within 0..100, got {self.moisture}")


@dataclass(frozen=True, slots=True)
class RiverState:
    """River level on a given day."""

    current_level: float        # m
    max_capacity: float         # m
    soil_moisture: float = 0.0  # %

    def __post_init__(self) -> None:
        if self.max_capacity <= 0:
            raise ValueError(f"Max capacity must be positive, got {self.max_capacity}")
        if not 0.0 <= self.current_level <= self.max_capacity:
            raise ValueError(
                f"River level {self.current_level} outside 0..{self.max_capacity}"
            )

    @property
    def fill_ratio(self) -> float:
        """Level as a fraction of capacity."""
        return self.current_level / self.max_capacity
