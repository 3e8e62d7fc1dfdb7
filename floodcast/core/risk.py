# floodcast/core/risk.py
"""Daily flood-risk classification and its reduction over a whole run.

Both functions are pure.  Thresholds are fractions of the river
capacity, never absolute levels.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ..constants import WARNING_FRACTION
from ..domain.river import RiverState
from ..domain.warning import FloodWarning, RiskLevel


def classify(level: float, max_capacity: float) -> FloodWarning:
    """Risk of a single day from its river level.

    ``level >= capacity`` floods, ``level >= 0.8 * capacity`` (boundary
    included) warns, anything lower is safe.
    """
    if level >= max_capacity:
        return FloodWarning.flooding()
    if level >= max_capacity * WARNING_FRACTION:
        return FloodWarning.warning(level)
    return FloodWarning.no_risk()


def classify_state(river: RiverState) -> FloodWarning:
    return classify(river.current_level, river.max_capacity)


def aggregate(results: Sequence[Tuple[RiverState, FloodWarning]]) -> FloodWarning:
    """Worst case over the horizon.

    A single flooding day dominates.  Otherwise, if any day warns, the
    summary is a warning carrying the highest level of **all** days
    (not only the warning days).  An empty run has no risk.
    """
    risks = [warning.risk for _, warning in results]
    if RiskLevel.FLOODING in risks:
        return FloodWarning.flooding()
    if RiskLevel.WARNING in risks:
        return FloodWarning.warning(max(river.current_level for river, _ in results))
    return FloodWarning.no_risk()
