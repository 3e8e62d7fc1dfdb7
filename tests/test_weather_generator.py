import numpy as np
import pytest

from floodcast.core.weather_generator import (
    MONTHLY_RAIN,
    apply_extreme_event,
    generate_weather,
    month_of_day,
)
from floodcast.domain.weather import WeatherSample
from floodcast.errors import InvalidInputError


@pytest.mark.parametrize(
    "day, month",
    [(1, 1), (30, 1), (31, 2), (150, 5), (330, 11), (331, 12), (365, 12), (366, 1)],
)
def test_month_of_day(day, month):
    assert month_of_day(day) == month


def test_generated_weather_is_valid(rng):
    samples = generate_weather(rng, 60, start_day=100)
    assert len(samples) == 60
    for offset, s in enumerate(samples):
        _, rain_max = MONTHLY_RAIN[month_of_day(100 + offset)]
        assert 0.0 <= s.rainfall < rain_max
        assert s.temperature == 0.0


def test_seeded_generator_is_reproducible():
    a = generate_weather(np.random.default_rng(3), 14, start_day=200)
    b = generate_weather(np.random.default_rng(3), 14, start_day=200)
    assert a == b


def test_rain_frequency_follows_month_table():
    # May: 70 % chance of rain
    samples = generate_weather(np.random.default_rng(11), 4000, start_day=121)
    may = [s for i, s in enumerate(samples) if month_of_day(121 + i) == 5]
    wet = sum(1 for s in may if s.rainfall > 0) / len(may)
    assert 0.6 < wet < 0.8


def test_non_positive_days_raises(rng):
    with pytest.raises(InvalidInputError):
        generate_weather(rng, 0, start_day=1)


class _FixedRng:
    """Returns scripted values for ``random`` and the lower bound for ``uniform``."""

    def __init__(self, u):
        self.u = u

    def random(self):
        return self.u

    def uniform(self, low, high):
        return low


def test_storm_burst_adds_rain():
    sample = WeatherSample(rainfall=5.0, temperature=12.0)
    out = apply_extreme_event(sample, _FixedRng(0.01))
    assert out.rainfall == pytest.approx(55.0)
    assert out.temperature == 12.0


def test_heat_excursion_adds_temperature():
    sample = WeatherSample(rainfall=5.0, temperature=12.0)
    out = apply_extreme_event(sample, _FixedRng(0.99))
    assert out.temperature == pytest.approx(17.0)
    assert out.rainfall == 5.0


def test_ordinary_day_is_unchanged():
    sample = WeatherSample(rainfall=5.0, temperature=12.0)
    assert apply_extreme_event(sample, _FixedRng(0.5)) is sample


def test_negative_rainfall_rejected():
    with pytest.raises(ValueError):
        WeatherSample(rainfall=-1.0)
