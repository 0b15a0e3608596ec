"""
Base types for calculators.

This module contains only dataclasses and enums with NO internal imports
to avoid circular dependencies between feature modules.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class BoulderingMode(str, Enum):
    """
    Input mode for bouldering load.

    The two modes use different formulas and are never unified.
    PER_CLIMB is canonical for order-sensitive (fatigue) scenarios.
    """
    PER_CLIMB = "per_climb"
    GRADE_FRACTION = "grade_fraction"


@dataclass(frozen=True)
class ClimbContribution:
    """Load contribution of one climb (per-climb mode)."""
    position: int               # 1-indexed, list order
    grade: float
    delta: float                # v_max - grade
    relative_intensity: float
    weight: float               # fatigue/novelty weight
    tut_sec: float              # clamped to >= 0
    contribution: float

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "position": self.position,
            "grade": self.grade,
            "delta": round(self.delta, 2),
            "relative_intensity": round(self.relative_intensity, 4),
            "weight": round(self.weight, 4),
            "tut_sec": round(self.tut_sec, 1),
            "contribution": round(self.contribution, 2),
        }


@dataclass(frozen=True)
class BoulderingResult:
    """
    Bouldering TLI with the intermediate metrics shown to the user.

    In grade-fraction mode total_tut is the derived work time, total_rest_within
    the remaining session time and freshness_factor is always 1.0.
    """
    total: float
    total_tut: float
    total_rest_within: float
    freshness_factor: float
    density_factor: float
    mode: BoulderingMode = BoulderingMode.PER_CLIMB
    contributions: List[ClimbContribution] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "BoulderingResult":
        """Result for a session with no bouldering."""
        return cls(
            total=0.0,
            total_tut=0.0,
            total_rest_within=0.0,
            freshness_factor=1.0,
            density_factor=1.0,
        )

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "mode": self.mode.value,
            "total": round(self.total, 2),
            "total_tut": round(self.total_tut, 1),
            "total_rest_within": round(self.total_rest_within, 1),
            "freshness_factor": round(self.freshness_factor, 4),
            "density_factor": round(self.density_factor, 4),
            "contributions": [c.to_dict() for c in self.contributions],
        }
