# floodcast/errors.py
"""Exception hierarchy of the package.

Only *caller* mistakes are exceptions.  Unavailable or malformed upstream
data (geocoder, weather archive) is reported as ``None`` by the source
adapters and resolved by the orchestrator with fallback defaults.
"""


class FloodcastError(Exception):
    """Base class for all floodcast errors."""


class InvalidInputError(FloodcastError, ValueError):
    """Input that can never produce a forecast (bad date, horizon <= 0, ...)."""


class InsufficientDataError(InvalidInputError):
    """A series is too short for the requested statistic."""
