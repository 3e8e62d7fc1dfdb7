# floodcast/cli/main.py
"""Command line interface of floodcast.

Usage examples:

  floodcast forecast --date 2024-05-01 --city Budapest --country Hungary
  floodcast forecast --date 2024-05-01 --city Szeged --country Hungary --seed 7 --json
  floodcast forecast --date 2024-05-01 --city X --country Y --offline --plot out/
  floodcast serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from ..config import Settings
from ..core import calibration
from ..errors import InvalidInputError
from ..facade.forecast import FloodForecaster, ForecastResult

logger = logging.getLogger(__name__)


def _print_table(result: ForecastResult) -> None:
    place = f"{result.city}, {result.country}" if result.city else "location"
    print(f"Forecast for {place} ({result.latitude:.2f}, {result.longitude:.2f})")
    if result.used_fallback:
        print(f"Using fallback data for: {', '.join(result.fallbacks)}")
    print(f"Initial soil moisture: {result.initial_soil.moisture:.1f}%")
    print(
        f"Average temperature ({len(result.days)} days from {result.start_date}): "
        f"{result.average_temperature:.2f}°C"
    )
    print(f"Flood risk: {result.overall}")
    print()
    for d, level, rain, temp, warning in zip(
        result.dates,
        result.river_levels,
        result.rainfall,
        result.predicted_temperatures,
        result.warnings,
    ):
        print(
            f"{d}: level {level:5.2f} m  rain {rain:6.2f} mm  "
            f"temp {temp:5.1f}°C  {warning}"
        )


def _cmd_forecast(args: argparse.Namespace) -> int:
    try:
        settings = Settings.from_env().with_overrides(
            forecast_days=args.days,
            calibration=args.calibration,
        )
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    forecaster = FloodForecaster.from_settings(settings, offline=args.offline)
    try:
        result = forecaster.run(args.date, args.city, args.country, seed=args.seed)
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_record(), indent=2))
    else:
        _print_table(result)

    if args.plot:
        # imported lazily: matplotlib is slow to load
        from ..visualization.plots import save_report

        save_report(result, args.plot)
        print(f"\nCharts saved to {args.plot}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from ..api.app import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floodcast",
        description="Short-term river flood risk forecast",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_fc = sub.add_parser("forecast", help="Run a forecast for a city")
    p_fc.add_argument("--date", required=True, help="Start date YYYY-MM-DD")
    p_fc.add_argument("--city", required=True)
    p_fc.add_argument("--country", required=True)
    p_fc.add_argument("--seed", type=int, help="Random seed for a reproducible run")
    p_fc.add_argument("--days", type=int, help="Forecast horizon in days")
    p_fc.add_argument(
        "--calibration", choices=calibration.names(), help="River model preset"
    )
    p_fc.add_argument("--json", action="store_true", help="Print the JSON record")
    p_fc.add_argument("--plot", metavar="DIR", help="Save PNG charts into DIR")
    p_fc.add_argument(
        "--offline", action="store_true", help="No network calls, use default data"
    )
    p_fc.set_defaults(func=_cmd_forecast)

    p_srv = sub.add_parser("serve", help="Start the HTTP service")
    p_srv.add_argument("--host", default="127.0.0.1")
    p_srv.add_argument("--port", type=int, default=8000)
    p_srv.set_defaults(func=_cmd_serve)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
