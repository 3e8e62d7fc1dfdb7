import math

import numpy as np
import pytest

from floodcast.core.forecaster import (
    TemperatureForecaster,
    predict_linear,
    predict_seasonal,
    seasonal_offset,
)
from floodcast.domain.historical import HistoricalStats
from floodcast.errors import InvalidInputError


def _stats(mean=20.0, trend=0.5):
    return HistoricalStats(mean_temperature=mean, temperature_trend=trend, mean_moisture=None, sample_count=10)


def test_linear_extrapolation():
    assert predict_linear(10.0, 0.5, 3) == pytest.approx([10.5, 11.0, 11.5])


@pytest.mark.parametrize("horizon", [0, -3])
def test_non_positive_horizon_raises(horizon):
    with pytest.raises(InvalidInputError):
        predict_linear(10.0, 0.0, horizon)
    with pytest.raises(InvalidInputError):
        predict_seasonal(10.0, 0.0, horizon, 1, np.random.default_rng(0))


def test_seasonal_stays_within_perturbation_bounds():
    mean, slope, anchor = 15.0, 0.2, 100
    temps = predict_seasonal(mean, slope, 30, anchor, np.random.default_rng(1))
    assert len(temps) == 30
    for i, t in enumerate(temps, start=1):
        base = mean + slope * i + seasonal_offset(anchor, i)
        assert abs(t - base) <= 2.0 + 1.5


def test_seasonal_offset_period():
    assert seasonal_offset(0, 365) == pytest.approx(seasonal_offset(0, 0), abs=1e-12)
    # peak a quarter year into the cycle
    assert seasonal_offset(0, 91) == pytest.approx(5.0 * math.sin(2 * math.pi * 91 / 365))


def test_seeded_forecast_is_reproducible():
    a = predict_seasonal(18.0, 0.1, 14, 120, np.random.default_rng(7))
    b = predict_seasonal(18.0, 0.1, 14, 120, np.random.default_rng(7))
    assert a == b


def test_forecaster_points_are_numbered_from_one(rng):
    points = TemperatureForecaster(seasonal=True).forecast(_stats(), 5, anchor_day=10, rng=rng)
    assert [p.day for p in points] == [1, 2, 3, 4, 5]


def test_linear_forecaster_needs_no_rng():
    points = TemperatureForecaster(seasonal=False).forecast(_stats(20.0, 1.0), 2)
    assert [p.temperature for p in points] == pytest.approx([21.0, 22.0])


def test_seasonal_forecaster_requires_rng():
    with pytest.raises(InvalidInputError):
        TemperatureForecaster(seasonal=True).forecast(_stats(), 3)
