import importlib
import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

RiverState = importlib.import_module('floodcast.domain.river').RiverState
SoilCondition = importlib.import_module('floodcast.domain.river').SoilCondition
WeatherSample = importlib.import_module('floodcast.domain.weather').WeatherSample
HistoricalSample = importlib.import_module('floodcast.domain.historical').HistoricalSample
Settings = importlib.import_module('floodcast.config').Settings


@pytest.fixture
def river():
    return RiverState(current_level=2.0, max_capacity=10.0, soil_moisture=50.0)


@pytest.fixture
def soil():
    return SoilCondition(moisture=50.0)


@pytest.fixture
def two_day_weather():
    return [
        WeatherSample(rainfall=10.0, temperature=20.0),
        WeatherSample(rainfall=20.0, temperature=25.0),
    ]


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def history_sample():
    # two "years" of a slowly warming window
    temps = [15.0 + 0.1 * i for i in range(48)]
    moisture = [40.0] * 24 + [60.0] * 24
    return HistoricalSample(temperatures=temps, moisture=moisture)


@pytest.fixture
def settings():
    return Settings(forecast_days=14, initial_level=2.0, max_capacity=10.0)
