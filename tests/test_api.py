import pytest
from fastapi.testclient import TestClient

from floodcast.api.app import create_app
from floodcast.config import Settings
from floodcast.facade.forecast import FloodForecaster


@pytest.fixture(scope="module")
def client():
    # offline forecaster: no geocoding or archive calls during tests
    app = create_app(FloodForecaster(Settings(forecast_days=10)))
    with TestClient(app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_simulate_happy_path(client):
    resp = client.get(
        "/api/simulate",
        params={"date": "2024-05-01", "city": "Budapest", "country": "Hungary", "seed": 5},
    )
    assert resp.status_code == 200
    body = resp.json()
    for key in ("riverLevels", "rainfall", "soilMoisture", "predictedTemps", "actualTemps", "dates"):
        assert len(body[key]) == 10
    assert body["usedFallback"] is True
    assert body["maxCapacity"] == 10.0
    assert body["floodRisk"] in ("No risk", "Warning", "Flooding")


def test_simulate_is_reproducible_with_seed(client):
    params = {"date": "2024-05-01", "city": "Budapest", "country": "Hungary", "seed": 11}
    assert client.get("/api/simulate", params=params).json() == client.get(
        "/api/simulate", params=params
    ).json()


def test_invalid_date_is_bad_request(client):
    resp = client.get(
        "/api/simulate", params={"date": "yesterday", "city": "Budapest", "country": "Hungary"}
    )
    assert resp.status_code == 400
    assert "date" in resp.json()["error"]


def test_missing_parameter_is_rejected(client):
    resp = client.get("/api/simulate", params={"date": "2024-05-01", "city": "Budapest"})
    assert resp.status_code == 422


def test_negative_seed_is_rejected(client):
    resp = client.get(
        "/api/simulate",
        params={"date": "2024-05-01", "city": "Budapest", "country": "Hungary", "seed": -1},
    )
    assert resp.status_code == 422
