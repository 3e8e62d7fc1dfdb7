# floodcast/sources/archive.py
"""Historical hourly weather from the Open-Meteo archive API.

For a forecast date D the archive is queried once per past year
(D − 1 year … D − ``years`` years), each time for the window
``[D' − window_days, D' + window_days]`` around that year's date D'.
Requested variables: ``temperature_2m`` (°C) and
``soil_moisture_0_to_7cm`` (m³/m³).

* :meth:`OpenMeteoArchive.fetch` returns the raw JSON payloads of the
  years that answered; a failed year is logged and skipped.  If no year
  answered, the result is ``None``.
* :meth:`OpenMeteoArchive.parse` concatenates the payloads oldest year
  first into a :class:`~floodcast.domain.historical.HistoricalSample`.
  Any schema mismatch makes the whole parse fail closed (``None``); a
  partial series is never returned.  ``null`` hourly values (gaps in
  the archive) are dropped.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..constants import SOIL_MOISTURE_DRY, SOIL_MOISTURE_WET
from ..domain.historical import HistoricalSample

logger = logging.getLogger(__name__)

ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
HOURLY_VARIABLES = "temperature_2m,soil_moisture_0_to_7cm"


def moisture_to_percent(volumetric: float) -> float:
    """Map volumetric soil moisture (m³/m³) onto 0…100 %.

    Typical soils range from 0.1 (dry) to 0.4 (saturated) m³/m³.
    """
    pct = (volumetric - SOIL_MOISTURE_DRY) / (SOIL_MOISTURE_WET - SOIL_MOISTURE_DRY) * 100.0
    return max(0.0, min(100.0, pct))


def shift_years(day: date, years: int) -> date:
    """``day`` moved by ``years``; 29 February falls back to the 28th."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def history_windows(end_date: date, years: int = 5, window_days: int = 3) -> List[tuple]:
    """``(start, end)`` date pairs, oldest year first."""
    windows = []
    for offset in range(-years, 0):
        centre = shift_years(end_date, offset)
        windows.append(
            (centre - timedelta(days=window_days), centre + timedelta(days=window_days))
        )
    return windows


class OpenMeteoArchive:
    """Client of the Open-Meteo historical weather archive."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = ARCHIVE_URL,
        years: int = 5,
        window_days: int = 3,
        timeout: float = 30.0,
    ) -> None:
        self.session = session or requests.Session()
        self.url = url
        self.years = years
        self.window_days = window_days
        self.timeout = timeout

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def fetch(self, lat: float, lon: float, end_date: date) -> Optional[List[Dict[str, Any]]]:
        """Raw JSON payloads of every year that answered, or ``None``."""
        payloads: List[Dict[str, Any]] = []
        for start, end in history_windows(end_date, self.years, self.window_days):
            params = {
                "latitude": f"{lat:.2f}",
                "longitude": f"{lon:.2f}",
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "hourly": HOURLY_VARIABLES,
            }
            try:
                response = self.session.get(self.url, params=params, timeout=self.timeout)
                response.raise_for_status()
                payloads.append(response.json())
            except requests.exceptions.RequestException as exc:
                logger.warning("Archive request %s..%s failed: %s", start, end, exc)
            except ValueError as exc:
                logger.warning("Archive response %s..%s is not JSON: %s", start, end, exc)

        if not payloads:
            logger.warning("No historical data for %.2f, %.2f around %s", lat, lon, end_date)
            return None
        return payloads

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse(payloads: Sequence[Dict[str, Any]]) -> Optional[HistoricalSample]:
        """Concatenate hourly temperature and moisture of all payloads."""
        temps: List[float] = []
        moisture: List[float] = []
        try:
            for payload in payloads:
                hourly = payload["hourly"]
                temps.extend(float(t) for t in hourly["temperature_2m"] if t is not None)
                moisture.extend(
                    moisture_to_percent(float(m))
                    for m in hourly["soil_moisture_0_to_7cm"]
                    if m is not None
                )
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Malformed archive payload: %r", exc)
            return None

        if not temps:
            logger.warning("Archive payloads contain no temperature readings")
            return None
        return HistoricalSample(temperatures=tuple(temps), moisture=tuple(moisture))

    def load(self, lat: float, lon: float, end_date: date) -> Optional[HistoricalSample]:
        """:meth:`fetch` followed by :meth:`parse`."""
        payloads = self.fetch(lat, lon, end_date)
        if payloads is None:
            return None
        sample = self.parse(payloads)
        if sample is not None:
            logger.info(
                "Loaded %d temperature and %d moisture readings",
                len(sample.temperatures),
                len(sample.moisture),
            )
        return sample
