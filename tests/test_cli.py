import json

import matplotlib

matplotlib.use("Agg")

from floodcast.cli.main import build_parser, main  # noqa: E402


def _run(capsys, monkeypatch, tmp_path, *argv):
    # keep the test independent of any local .env / FLOODCAST_* variables
    monkeypatch.chdir(tmp_path)
    for name in ("FLOODCAST_FORECAST_DAYS", "FLOODCAST_CALIBRATION"):
        monkeypatch.delenv(name, raising=False)
    code = main(list(argv))
    return code, capsys.readouterr()


def test_parser_requires_command():
    parser = build_parser()
    args = parser.parse_args(["forecast", "--date", "2024-05-01", "--city", "A", "--country", "B"])
    assert args.command == "forecast"
    assert args.seed is None


def test_offline_forecast_table(capsys, monkeypatch, tmp_path):
    code, out = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "2024-05-01", "--city", "Budapest", "--country", "Hungary",
        "--offline", "--seed", "1", "--days", "5",
    )
    assert code == 0
    assert "Flood risk:" in out.out
    assert "fallback" in out.out
    assert sum(1 for line in out.out.splitlines() if line.startswith("2024-05-0")) == 5


def test_offline_forecast_json(capsys, monkeypatch, tmp_path):
    code, out = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "2024-05-01", "--city", "Budapest", "--country", "Hungary",
        "--offline", "--seed", "1", "--json", "--calibration", "damped",
    )
    assert code == 0
    record = json.loads(out.out)
    assert record["calibration"] == "damped"
    assert len(record["riverLevels"]) == 14
    assert min(record["riverLevels"]) >= 1.0


def test_invalid_date_exit_code(capsys, monkeypatch, tmp_path):
    code, out = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "not-a-date", "--city", "A", "--country", "B", "--offline",
    )
    assert code == 2
    assert "Invalid date" in out.err


def test_invalid_days_exit_code(capsys, monkeypatch, tmp_path):
    code, out = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "2024-05-01", "--city", "A", "--country", "B", "--offline", "--days", "0",
    )
    assert code == 2


def test_plot_option_writes_charts(capsys, monkeypatch, tmp_path):
    code, _ = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "2024-05-01", "--city", "A", "--country", "B",
        "--offline", "--seed", "2", "--plot", str(tmp_path / "charts"),
    )
    assert code == 0
    assert (tmp_path / "charts" / "river_levels.png").exists()


def test_negative_seed_exit_code(capsys, monkeypatch, tmp_path):
    code, out = _run(
        capsys, monkeypatch, tmp_path,
        "forecast", "--date", "2024-05-01", "--city", "A", "--country", "B", "--offline", "--seed", "-1",
    )
    assert code == 2
    assert "Seed" in out.err
