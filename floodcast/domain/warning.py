# floodcast/domain/warning.py
"""Flood risk classification of a single day (or of a whole run).

The set of outcomes is closed: **NO_RISK**, **WARNING** and
**FLOODING**.  Only a warning carries a payload, the river level that
triggered it.  ``FloodWarning`` pairs the enum member with that payload
and offers the three constructors, so callers never build an invalid
combination by hand::

    FloodWarning.warning(8.5)
    FloodWarning.flooding()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RiskLevel(Enum):
    """Ordered risk categories; the value doubles as severity rank."""

    NO_RISK = 0
    WARNING = 1
    FLOODING = 2

    def __str__(self) -> str:
        return {
            RiskLevel.NO_RISK: "No risk",
            RiskLevel.WARNING: "Warning",
            RiskLevel.FLOODING: "Flooding",
        }[self]


@dataclass(frozen=True, slots=True)
class FloodWarning:
    """Risk tag plus the triggering level for warnings."""

    risk: RiskLevel
    level: Optional[float] = None

    def __post_init__(self) -> None:
        if (self.risk is RiskLevel.WARNING) != (self.level is not None):
            raise ValueError("Only a WARNING carries a level payload")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def no_risk(cls) -> "FloodWarning":
        return cls(RiskLevel.NO_RISK)

    @classmethod
    def warning(cls, level: float) -> "FloodWarning":
        return cls(RiskLevel.WARNING, float(level))

    @classmethod
    def flooding(cls) -> "FloodWarning":
        return cls(RiskLevel.FLOODING)

    # ------------------------------------------------------------------

    @property
    def label(self) -> str:
        """Short human readable label, e.g. ``"Warning (8.50 m)"``."""
        if self.risk is RiskLevel.WARNING:
            return f"{self.risk} ({self.level:.2f} m)"
        return str(self.risk)

    def __str__(self) -> str:
        return self.label
