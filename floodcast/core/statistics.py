# floodcast/core/statistics.py
"""Mean and least-squares trend of historical temperature readings.

The archive delivers hourly readings of a ±N-day window around the same
calendar date for several past years.  These windows are concatenated
and regressed against their **sampling index** 1…N, not against
calendar time: the gaps between years are ignored on purpose, the slope
is a per-sample rate.  Callers must pass the readings time-ordered.

    slope = (N·Σxy − Σx·Σy) / (N·Σx² − (Σx)²)

A regression needs at least two points; with one point the denominator
vanishes, with none the mean is undefined.  Both cases raise
:class:`~floodcast.errors.InsufficientDataError` instead of leaking
NaN/Inf into the forecast.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ..domain.historical import HistoricalSample, HistoricalStats
from ..errors import InsufficientDataError

logger = logging.getLogger(__name__)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; raises on an empty series."""
    if len(values) == 0:
        raise InsufficientDataError("Cannot average an empty series")
    return float(np.mean(np.asarray(values, dtype=float)))


def linear_trend(values: Sequence[float]) -> float:
    """OLS slope of ``values`` against the 1-based index."""
    n = len(values)
    if n < 2:
        raise InsufficientDataError(
            f"Linear trend needs at least 2 points, got {n}"
        )
    y = np.asarray(values, dtype=float)
    x = np.arange(1, n + 1, dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = float(np.dot(x, y))
    sum_xx = float(np.dot(x, x))

    denominator = n * sum_xx - sum_x * sum_x
    return float((n * sum_xy - sum_x * sum_y) / denominator)


def compute_stats(
    temperatures: Sequence[float],
    moisture: Optional[Sequence[float]] = None,
) -> HistoricalStats:
    """Return mean temperature, temperature trend and mean moisture.

    ``moisture`` is optional; an empty or missing series yields
    ``mean_moisture=None``.
    """
    trend = linear_trend(temperatures)
    avg = mean(temperatures)
    avg_moisture = mean(moisture) if moisture is not None and len(moisture) > 0 else None

    logger.debug(
        "historical stats: n=%d mean=%.2f trend=%.5f moisture=%s",
        len(temperatures),
        avg,
        trend,
        "n/a" if avg_moisture is None else f"{avg_moisture:.1f}",
    )
    return HistoricalStats(
        mean_temperature=avg,
        temperature_trend=trend,
        mean_moisture=avg_moisture,
        sample_count=len(temperatures),
    )


def stats_from_sample(sample: HistoricalSample) -> HistoricalStats:
    """Shortcut for :func:`compute_stats` on an archive sample."""
    return compute_stats(sample.temperatures, sample.moisture)
