import os

import pytest

from floodcast.config import Settings


def test_defaults():
    s = Settings()
    assert s.forecast_days == 14
    assert (s.initial_level, s.max_capacity) == (2.0, 10.0)
    assert (s.default_latitude, s.default_longitude) == (47.5, 19.0)
    assert s.river_calibration.name == "standard"


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FLOODCAST_FORECAST_DAYS", "7")
    monkeypatch.setenv("FLOODCAST_CALIBRATION", "damped")
    monkeypatch.setenv("FLOODCAST_EXTREME_EVENTS", "yes")
    monkeypatch.setenv("FLOODCAST_MAX_CAPACITY", "12.5")
    s = Settings.from_env(env_file=str(tmp_path / "missing.env"))
    assert s.forecast_days == 7
    assert s.calibration == "damped"
    assert s.extreme_events is True
    assert s.max_capacity == 12.5


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    monkeypatch.delenv("FLOODCAST_DEFAULT_TEMPERATURE", raising=False)
    env = tmp_path / ".env"
    env.write_text("FLOODCAST_DEFAULT_TEMPERATURE=12.5\n")
    try:
        s = Settings.from_env(env_file=str(env))
    finally:
        os.environ.pop("FLOODCAST_DEFAULT_TEMPERATURE", None)
    assert s.default_temperature == 12.5


def test_overrides_win(monkeypatch, tmp_path):
    monkeypatch.setenv("FLOODCAST_FORECAST_DAYS", "7")
    s = Settings.from_env(env_file=str(tmp_path / "missing.env"), forecast_days=3, calibration=None)
    assert s.forecast_days == 3
    assert s.calibration == "standard"


@pytest.mark.parametrize(
    "name, value",
    [("FLOODCAST_FORECAST_DAYS", "soon"), ("FLOODCAST_SEASONAL", "maybe"), ("FLOODCAST_CALIBRATION", "wild")],
)
def test_invalid_env_values(monkeypatch, tmp_path, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings.from_env(env_file=str(tmp_path / "missing.env"))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"forecast_days": 0},
        {"max_capacity": 0.0},
        {"initial_level": 11.0},
        {"initial_level": -1.0},
        {"min_initial_moisture": 90.0},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)
