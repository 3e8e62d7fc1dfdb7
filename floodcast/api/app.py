# floodcast/api/app.py
"""FastAPI service exposing the flood forecast.

``GET /api/simulate?date=YYYY-MM-DD&city=...&country=...[&seed=...]``
returns the flat record of
:meth:`~floodcast.facade.forecast.ForecastResult.to_record`.  Invalid
input (bad date, empty city) is answered with HTTP 400 and
``{"error": message}``; unavailable upstream data never fails a request,
the forecast then runs on fallback data.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from ..config import Settings
from ..errors import InvalidInputError
from ..facade.forecast import FloodForecaster

logger = logging.getLogger(__name__)


def create_app(forecaster: Optional[FloodForecaster] = None) -> FastAPI:
    """Create the application; a forecaster is built from the environment if omitted."""
    if forecaster is None:
        forecaster = FloodForecaster.from_settings(Settings.from_env())

    app = FastAPI(title="floodcast")
    app.state.forecaster = forecaster

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/simulate")
    def simulate(
        date: str = Query(..., examples=["2024-05-01"]),
        city: str = Query(..., examples=["Budapest"]),
        country: str = Query(..., examples=["Hungary"]),
        seed: Optional[int] = Query(None, ge=0),
    ):
        try:
            result = app.state.forecaster.run(date, city, country, seed=seed)
        except InvalidInputError as exc:
            logger.info("Rejected request %s/%s/%s: %s", date, city, country, exc)
            return JSONResponse(status_code=400, content={"error": str(exc)})
        return result.to_record()

    return app
