# floodcast/sources/geocoder.py
"""City/country → coordinates via the OpenStreetMap Nominatim API.

Every failure (network error, HTTP error, empty result, unparseable
coordinates) is logged and reported as ``None``; choosing a fallback
location is the caller's business.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimGeocoder:
    """Forward geocoding of a ``"city, country"`` query."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = NOMINATIM_URL,
        user_agent: str = "floodcast/0.1",
        timeout: float = 30.0,
    ) -> None:
        self.session = session or requests.Session()
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout

    def resolve(self, city: str, country: str) -> Optional[Tuple[float, float]]:
        """Return ``(latitude, longitude)`` of the best match, or ``None``."""
        params = {"q": f"{city}, {country}", "format": "json", "limit": 1}
        # Nominatim rejects requests without a User-Agent
        headers = {"User-Agent": self.user_agent, "Accept-Language": "en"}
        try:
            response = self.session.get(
                self.url, params=params, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as exc:
            logger.warning("Geocoding %s, %s failed: %s", city, country, exc)
            return None
        except ValueError as exc:
            logger.warning("Geocoding %s, %s returned invalid JSON: %s", city, country, exc)
            return None

        if not isinstance(data, list) or not data:
            logger.warning("No coordinates found for %s, %s", city, country)
            return None

        first = data[0]
        try:
            lat, lon = float(first["lat"]), float(first["lon"])
        except (KeyError, TypeError, ValueError):
            logger.warning(
                "Invalid coordinate format for %s, %s: %r", city, country, first
            )
            return None

        logger.info("Coordinates of %s, %s: %.4f, %.4f", city, country, lat, lon)
        return lat, lon
