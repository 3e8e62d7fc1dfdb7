# floodcast/domain/forecast.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """Predicted temperature of the ``day``-th forecast day (1-based)."""

    day: int
    temperature: float  # °C
