import pytest

from floodcast.core.risk import aggregate, classify, classify_state
from floodcast.core.river_simulator import DayResult
from floodcast.domain.river import RiverState
from floodcast.domain.warning import FloodWarning, RiskLevel


def _day(level, warning, capacity=10.0):
    return DayResult(RiverState(current_level=level, max_capacity=capacity), warning)


def test_classify_no_risk():
    assert classify(5.0, 10.0) == FloodWarning.no_risk()


def test_classify_warning_carries_level():
    w = classify(8.5, 10.0)
    assert w.risk is RiskLevel.WARNING
    assert w.level == pytest.approx(8.5)


def test_warning_boundary_is_inclusive():
    assert classify(8.0, 10.0).risk is RiskLevel.WARNING
    assert classify(7.999, 10.0).risk is RiskLevel.NO_RISK


def test_flooding_at_capacity():
    assert classify(10.0, 10.0) == FloodWarning.flooding()


def test_thresholds_scale_with_capacity():
    assert classify(4.0, 5.0).risk is RiskLevel.WARNING
    assert classify(4.0, 50.0).risk is RiskLevel.NO_RISK


def test_classify_state():
    assert classify_state(RiverState(9.0, 10.0)).risk is RiskLevel.WARNING


def test_any_flooding_dominates():
    days = [
        _day(5.0, FloodWarning.no_risk()),
        _day(8.5, FloodWarning.warning(8.5)),
        _day(10.0, FloodWarning.flooding()),
        _day(6.0, FloodWarning.no_risk()),
    ]
    assert aggregate(days) == FloodWarning.flooding()


def test_warning_reports_max_level_over_all_days():
    days = [
        _day(8.2, FloodWarning.warning(8.2)),
        _day(7.9, FloodWarning.no_risk()),
    ]
    assert aggregate(days) == FloodWarning.warning(8.2)


def test_max_level_includes_non_warning_days():
    # a lower capacity on the last day makes a 9.5 m level unremarkable there
    days = [
        _day(8.1, FloodWarning.warning(8.1)),
        _day(9.5, FloodWarning.no_risk(), capacity=20.0),
    ]
    assert aggregate(days).level == pytest.approx(9.5)


def test_quiet_run_has_no_risk():
    days = [_day(2.0, FloodWarning.no_risk()), _day(3.0, FloodWarning.no_risk())]
    assert aggregate(days).risk is RiskLevel.NO_RISK


def test_empty_run_has_no_risk():
    assert aggregate([]) == FloodWarning.no_risk()


def test_warning_payload_rules():
    with pytest.raises(ValueError):
        FloodWarning(RiskLevel.WARNING)
    with pytest.raises(ValueError):
        FloodWarning(RiskLevel.FLOODING, 10.0)


def test_labels():
    assert FloodWarning.no_risk().label == "No risk"
    assert FloodWarning.warning(8.5).label == "Warning (8.50 m)"
    assert str(FloodWarning.flooding()) == "Flooding"
