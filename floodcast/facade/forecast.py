# floodcast/facade/forecast.py
"""High-level *facade* producing a complete flood forecast.

**FloodForecaster** chains the whole pipeline for a request keyed by
``(date, city, country)``:

1. geocode the location (default coordinates when that fails);
2. load the historical archive and derive mean/trend/moisture
   (flat defaults when the archive is unavailable or too short);
3. forecast the daily temperatures;
4. generate the daily rainfall and join the temperatures in;
5. run the river simulation and reduce it to an overall risk.

The forecast always completes: upstream failures only switch the run to
fallback data, which the result reports in ``fallbacks``.  Every run
builds its own ``numpy`` generator, so concurrent requests never share a
random source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union

import numpy as np
import pandas as pd
import requests

from ..config import Settings
from ..core.forecaster import TemperatureForecaster
from ..core.river_simulator import DayResult, RiverSimulator
from ..core.risk import aggregate
from ..core.statistics import stats_from_sample
from ..core.weather_generator import apply_extreme_event, generate_weather
from ..domain.forecast import ForecastPoint
from ..domain.historical import HistoricalSample, HistoricalStats
from ..domain.river import RiverState, SoilCondition
from ..domain.warning import FloodWarning
from ..domain.weather import WeatherSample
from ..errors import InsufficientDataError, InvalidInputError
from ..sources.archive import OpenMeteoArchive
from ..sources.geocoder import NominatimGeocoder

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Collaborator interfaces
# ---------------------------------------------------------------------------


class Geocoder(Protocol):
    def resolve(self, city: str, country: str) -> Optional[Tuple[float, float]]:
        ...


class HistorySource(Protocol):
    def load(self, lat: float, lon: float, end_date: date) -> Optional[HistoricalSample]:
        ...


def parse_date(value: Union[str, date]) -> date:
    """Accept a :class:`date` or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def _check_seed(seed: Optional[int]) -> None:
    if seed is not None and seed < 0:
        raise InvalidInputError(f"Seed must be a non-negative integer, got {seed}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class ForecastResult:
    """Everything a presentation layer needs about one forecast run."""

    start_date: date
    latitude: float
    longitude: float
    stats: HistoricalStats
    initial_river: RiverState
    initial_soil: SoilCondition
    weather: List[WeatherSample]
    forecast: List[ForecastPoint]
    actual_temperatures: List[float]
    days: List[DayResult]
    overall: FloodWarning
    calibration: str
    city: Optional[str] = None
    country: Optional[str] = None
    fallbacks: Tuple[str, ...] = field(default_factory=tuple)

    # --- plain sequences -------------------------------------------------

    @property
    def dates(self) -> List[date]:
        return [self.start_date + timedelta(days=i) for i in range(len(self.days))]

    @property
    def river_levels(self) -> List[float]:
        return [d.river.current_level for d in self.days]

    @property
    def soil_moisture(self) -> List[float]:
        return [d.river.soil_moisture for d in self.days]

    @property
    def rainfall(self) -> List[float]:
        return [w.rainfall for w in self.weather[: len(self.days)]]

    @property
    def predicted_temperatures(self) -> List[float]:
        # as simulated, heat excursions included
        return [w.temperature for w in self.weather[: len(self.days)]]

    @property
    def warnings(self) -> List[FloodWarning]:
        return [d.warning for d in self.days]

    # --- scalars ---------------------------------------------------------

    @property
    def average_temperature(self) -> float:
        temps = self.predicted_temperatures
        return sum(temps) / len(temps) if temps else float("nan")

    @property
    def final_level(self) -> float:
        return self.days[-1].river.current_level if self.days else self.initial_river.current_level

    @property
    def max_capacity(self) -> float:
        return self.initial_river.max_capacity

    @property
    def used_fallback(self) -> bool:
        return bool(self.fallbacks)

    # --- serialisation ---------------------------------------------------

    def to_record(self) -> Dict[str, Any]:
        """Flat JSON-ready record: equal-length arrays plus summary scalars."""
        return {
            "dates": [d.isoformat() for d in self.dates],
            "riverLevels": self.river_levels,
            "rainfall": self.rainfall,
            "soilMoisture": self.soil_moisture,
            "predictedTemps": self.predicted_temperatures,
            "actualTemps": self.actual_temperatures[: len(self.days)],
            "warnings": [w.label for w in self.warnings],
            "averageTemperature": self.average_temperature,
            "initialSoilMoisture": self.initial_soil.moisture,
            "floodRisk": str(self.overall.risk),
            "floodRiskLevel": self.overall.level,
            "initialLevel": self.initial_river.current_level,
            "currentLevel": self.final_level,
            "maxCapacity": self.max_capacity,
            "calibration": self.calibration,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "usedFallback": self.used_fallback,
            "fallbacks": list(self.fallbacks),
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per simulated day."""
        return pd.DataFrame(
            {
                "date": self.dates,
                "rainfall_mm": self.rainfall,
                "temperature_c": self.predicted_temperatures,
                "actual_temperature_c": self.actual_temperatures[: len(self.days)],
                "river_level_m": self.river_levels,
                "soil_moisture_pct": self.soil_moisture,
                "risk": [str(w.risk) for w in self.warnings],
            }
        )


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class FloodForecaster:
    """Single entry point for running a forecast.

    ``geocoder`` and ``history`` may be ``None`` (offline mode): the run
    then uses the default location and the flat default climate.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        geocoder: Optional[Geocoder] = None,
        history: Optional[HistorySource] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.geocoder = geocoder
        self.history = history
        self.simulator = RiverSimulator(self.settings.river_calibration)
        self.forecaster = TemperatureForecaster(seasonal=self.settings.seasonal)

    @classmethod
    def from_settings(cls, settings: Settings, offline: bool = False) -> "FloodForecaster":
        """Forecaster wired to the Nominatim and Open-Meteo clients."""
        if offline:
            return cls(settings)
        session = requests.Session()
        geocoder = NominatimGeocoder(
            session=session,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )
        history = OpenMeteoArchive(
            session=session,
            years=settings.history_years,
            window_days=settings.window_days,
            timeout=settings.request_timeout,
        )
        return cls(settings, geocoder=geocoder, history=history)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        when: Union[str, date],
        city: str,
        country: str,
        seed: Optional[int] = None,
    ) -> ForecastResult:
        """Forecast for a named place."""
        start = parse_date(when)
        if not city or not city.strip() or not country or not country.strip():
            raise InvalidInputError("City and country must not be empty")
        _check_seed(seed)

        coords = self.geocoder.resolve(city, country) if self.geocoder else None
        fallbacks: Tuple[str, ...] = ()
        if coords is None:
            logger.warning(
                "Could not locate %s, %s; using default location %.2f, %.2f",
                city,
                country,
                self.settings.default_latitude,
                self.settings.default_longitude,
            )
            coords = (self.settings.default_latitude, self.settings.default_longitude)
            fallbacks = ("location",)

        result = self.simulate_location(coords[0], coords[1], start, seed=seed)
        result.city, result.country = city, country
        result.fallbacks = fallbacks + result.fallbacks
        return result

    def simulate_location(
        self,
        lat: float,
        lon: float,
        when: Union[str, date],
        seed: Optional[int] = None,
    ) -> ForecastResult:
        """Forecast for known coordinates."""
        start = parse_date(when)
        _check_seed(seed)
        cfg = self.settings
        rng = np.random.default_rng(seed)
        day_of_year = start.timetuple().tm_yday

        stats, fallbacks = self._historical_stats(lat, lon, start)

        forecast = self.forecaster.forecast(
            stats, cfg.forecast_days, anchor_day=day_of_year, rng=rng
        )
        temps = [p.temperature for p in forecast]

        weather = [
            replace(sample, temperature=t)
            for sample, t in zip(generate_weather(rng, cfg.forecast_days, day_of_year), temps)
        ]
        if cfg.extreme_events:
            weather = [apply_extreme_event(w, rng) for w in weather]
            # heat excursions must reach the simulator
            temps = [w.temperature for w in weather]

        moisture = stats.mean_moisture
        if moisture is None:
            logger.warning("No soil moisture history; using %.1f %%", cfg.default_moisture)
            moisture = cfg.default_moisture
            fallbacks += ("moisture",)
        soil = SoilCondition(
            moisture=min(cfg.max_initial_moisture, max(cfg.min_initial_moisture, moisture))
        )
        river = RiverState(
            current_level=cfg.initial_level,
            max_capacity=cfg.max_capacity,
            soil_moisture=soil.moisture,
        )

        days = self.simulator.simulate(river, soil, weather, temps)
        overall = aggregate(days)
        # stand-in observations for the predicted-vs-actual comparison
        actual = [t + rng.uniform(-1.0, 1.0) for t in temps]

        logger.info(
            "Forecast %s (%.2f, %.2f): %d days, avg %.1f °C, risk %s%s",
            start,
            lat,
            lon,
            len(days),
            sum(temps) / len(temps),
            overall,
            f" [fallback: {', '.join(fallbacks)}]" if fallbacks else "",
        )
        return ForecastResult(
            start_date=start,
            latitude=lat,
            longitude=lon,
            stats=stats,
            initial_river=river,
            initial_soil=soil,
            weather=weather,
            forecast=forecast,
            actual_temperatures=actual,
            days=days,
            overall=overall,
            calibration=self.simulator.calibration.name,
            fallbacks=fallbacks,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _default_stats(self) -> HistoricalStats:
        return HistoricalStats(
            mean_temperature=self.settings.default_temperature,
            temperature_trend=0.0,
            mean_moisture=self.settings.default_moisture,
            sample_count=0,
        )

    def _historical_stats(
        self, lat: float, lon: float, start: date
    ) -> Tuple[HistoricalStats, Tuple[str, ...]]:
        sample = self.history.load(lat, lon, start) if self.history else None
        if sample is None:
            logger.warning(
                "Historical data unavailable; using %.1f °C and %.1f %% moisture",
                self.settings.default_temperature,
                self.settings.default_moisture,
            )
            return self._default_stats(), ("history",)
        try:
            stats = stats_from_sample(sample)
        except InsufficientDataError as exc:
            logger.warning("Historical data unusable (%s); using defaults", exc)
            return self._default_stats(), ("history",)
        logger.info(
            "Historical average temperature %.2f °C, trend %.4f, moisture %s",
            stats.mean_temperature,
            stats.temperature_trend,
            "n/a" if stats.mean_moisture is None else f"{stats.mean_moisture:.1f} %",
        )
        return stats, ()
