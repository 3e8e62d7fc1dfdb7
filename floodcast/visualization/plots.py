# floodcast/visualization/plots.py
"""Thin matplotlib wrappers for the key forecast charts.

Each ``plot_*`` function draws into a new figure and returns it; pass
``show=True`` for an interactive window.  :func:`save_report` writes all
three charts as PNG files into a directory together with an
``index.html`` page showing them.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Dict, Union

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..constants import WARNING_FRACTION
from ..facade.forecast import ForecastResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 1) River level, rainfall and soil moisture
# ---------------------------------------------------------------------------


def plot_river_levels(result: ForecastResult, show: bool = False) -> Figure:
    """River level (left axis) against rainfall and soil moisture (right axis)."""
    x = [d.isoformat() for d in result.dates]

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(x, result.river_levels, color="blue", marker="o", label="River level (m)")
    ax.axhline(result.max_capacity, ls="--", color="red", label="Capacity")
    ax.axhline(
        result.max_capacity * WARNING_FRACTION, ls=":", color="orange", label="Warning"
    )
    ax.set_ylabel("River level, m")
    ax.set_ylim(0, result.max_capacity * 1.1)

    ax2 = ax.twinx()
    ax2.plot(x, result.rainfall, ls=":", color="lightblue", label="Rainfall (mm)")
    ax2.plot(x, result.soil_moisture, ls=":", color="green", label="Soil moisture (%)")
    ax2.set_ylabel("Rainfall, mm / Soil moisture, %")

    lines = ax.get_legend_handles_labels()
    lines2 = ax2.get_legend_handles_labels()
    ax.legend(lines[0] + lines2[0], lines[1] + lines2[1], loc="upper left")
    ax.set_title("River level, rainfall and soil moisture")
    ax.tick_params(axis="x", rotation=45)
    ax.grid(True)
    fig.tight_layout()
    if show:
        plt.show()
    return fig


# ---------------------------------------------------------------------------
# 2) Flood risk gauge
# ---------------------------------------------------------------------------


def plot_flood_risk(result: ForecastResult, show: bool = False) -> Figure:
    """Single bar: final level as a percentage of capacity."""
    pct = result.final_level / result.max_capacity * 100.0
    if pct >= 100.0:
        color = "red"
    elif pct >= WARNING_FRACTION * 100.0:
        color = "orange"
    else:
        color = "green"

    fig, ax = plt.subplots(figsize=(4, 3))
    ax.bar(["Flood risk"], [pct], color=color)
    ax.set_ylim(0, 120)
    ax.set_ylabel("Risk, % of capacity")
    ax.set_title(f"Flood risk: {result.overall}")
    fig.tight_layout()
    if show:
        plt.show()
    return fig


# ---------------------------------------------------------------------------
# 3) Predicted vs actual temperature
# ---------------------------------------------------------------------------


def plot_temperatures(result: ForecastResult, show: bool = False) -> Figure:
    x = [d.isoformat() for d in result.dates]
    avg = result.average_temperature

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(x, result.predicted_temperatures, color="red", label="Predicted")
    ax.plot(
        x,
        result.actual_temperatures[: len(x)],
        ls=":",
        color="orange",
        label="Actual",
    )
    ax.axhline(avg, ls="--", color="green", label=f"Average ({avg:.1f} °C)")
    ax.set_ylabel("Temperature, °C")
    ax.set_title("Temperature comparison")
    ax.tick_params(axis="x", rotation=45)
    ax.grid(True)
    ax.legend()
    fig.tight_layout()
    if show:
        plt.show()
    return fig


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


_INDEX_TEMPLATE = """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>Flood forecast</title>
<style>body{{font-family:Arial,sans-serif;margin:20px}}h1,h2{{color:#333}}.summary{{font-size:1.2em;margin:10px 0}}</style>
</head><body>
<h1>Flood forecast{place}</h1>
<div class="summary">Projected average temperature: <strong>{avg:.1f} °C</strong></div>
<div class="summary">Initial soil moisture: <strong>{moisture:.1f} %</strong></div>
<div class="summary">Flood risk: <strong>{risk}</strong></div>
<h2>River levels, rainfall and soil moisture</h2><img src="river_levels.png" alt="River levels">
<h2>Flood risk</h2><img src="flood_risk.png" alt="Flood risk">
<h2>Temperatures</h2><img src="temperatures.png" alt="Temperatures">
</body></html>
"""


def _index_html(result: ForecastResult) -> str:
    place = f" for {html.escape(result.city)}, {html.escape(result.country or '')}" if result.city else ""
    return _INDEX_TEMPLATE.format(
        place=place,
        avg=result.average_temperature,
        moisture=result.initial_soil.moisture,
        risk=html.escape(str(result.overall)),
    )


def save_report(result: ForecastResult, out_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write the three charts and an ``index.html`` page embedding them.

    Returns the paths keyed by chart name, plus ``"index"``.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    charts = {
        "river_levels": plot_river_levels,
        "flood_risk": plot_flood_risk,
        "temperatures": plot_temperatures,
    }
    paths: Dict[str, Path] = {}
    for name, draw in charts.items():
        fig = draw(result)
        path = out / f"{name}.png"
        fig.savefig(path)
        plt.close(fig)
        paths[name] = path
    index = out / "index.html"
    index.write_text(_index_html(result), encoding="utf-8")
    paths["index"] = index
    logger.info("Charts saved to %s", out)
    return paths
