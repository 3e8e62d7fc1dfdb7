# floodcast/__init__.py
"""**floodcast** – short-term river flood risk forecasting.

The package initialiser re-exports the key entities for external users:

--- from floodcast import FloodForecaster, Settings, RiverState, FloodWarning ---

The objects listed in ``__all__`` form the public API; everything else
is reachable through the subpackages (``core``, ``domain``, ``sources``,
``facade``, ``visualization``, ``api``, ``cli``).
"""

from __future__ import annotations

from .config import Settings
from .facade.forecast import FloodForecaster, ForecastResult
from .domain.river import RiverState, SoilCondition
from .domain.warning import FloodWarning, RiskLevel
from .domain.weather import WeatherSample
from .errors import FloodcastError, InsufficientDataError, InvalidInputError

__version__ = "0.1.0"

__all__ = [
    "FloodForecaster",  # facade running the full pipeline
    "ForecastResult",   # per-day sequences + summary of one run
    "Settings",         # horizon, initial conditions, fallbacks
    "RiverState",
    "SoilCondition",
    "WeatherSample",
    "FloodWarning",     # NO_RISK / WARNING(level) / FLOODING
    "RiskLevel",
    "FloodcastError",
    "InvalidInputError",
    "InsufficientDataError",
]
