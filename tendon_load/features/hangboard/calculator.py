"""
Hangboard load.

Relative intensity of a hang is the applied load over the climber's
capacity on that edge and grip:

    mvc20   = calibrated MVC at 20 mm, or body + 20 kg if not calibrated
    mvcEdge = mvc20 * (20 / edge_mm)^k * grip multiplier
    RI      = clamp((body + added) / mvcEdge, 0, 1.2)

Per set: RI * TUT * DF, with DF from hang time vs inter-rep rest.

Example (70 kg + 10 kg, 15 mm half crimp, 5 x 10s, no rest):
    mvcEdge ~102.4 kg, RI ~0.781, TUT 50s, DF 1.0 -> ~39.05 per set
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tendon_load.shared.constants import (
    Grip,
    DEFAULT_DENSITY_EXP_HB,
    DEFAULT_K_EDGE_EXP,
    HANGBOARD_RI_CAP,
    MVC_BODYWEIGHT_OFFSET_KG,
)
from tendon_load.shared.formulas import (
    clamp,
    density_factor,
    edge_scaling,
    grip_multiplier,
)


@dataclass(frozen=True)
class HangboardRow:
    """
    One hang protocol performed for a number of sets.

    added_kg may be negative (assisted hangs). mvc20_kg=None means
    no calibration; edge_mm must be > 0.
    """
    body_kg: float
    added_kg: float
    edge_mm: float
    grip: Grip
    duration_sec: float
    reps: int
    rest_between_reps_sec: float
    mvc20_kg: Optional[float] = None
    density_exp_hb: float = DEFAULT_DENSITY_EXP_HB
    k_edge_exp: float = DEFAULT_K_EDGE_EXP
    sets: int = 1


@dataclass(frozen=True)
class HangboardSetResult:
    """Result for one hangboard row."""
    per_set: float
    work_seconds: float
    rest_seconds: float
    density_factor: float
    relative_intensity: float
    mvc20_kg: float
    mvc_edge_kg: float
    sets: int

    @property
    def total(self) -> float:
        """TLI over all sets."""
        return self.per_set * self.sets

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "per_set": round(self.per_set, 2),
            "total": round(self.total, 2),
            "sets": self.sets,
            "work_seconds": round(self.work_seconds, 1),
            "rest_seconds": round(self.rest_seconds, 1),
            "density_factor": round(self.density_factor, 4),
            "relative_intensity": round(self.relative_intensity, 4),
            "mvc20_kg": round(self.mvc20_kg, 1),
            "mvc_edge_kg": round(self.mvc_edge_kg, 1),
        }


@dataclass(frozen=True)
class HangboardSummary:
    """All hangboard rows of a session."""
    rows: List[HangboardSetResult] = field(default_factory=list)

    @property
    def total(self) -> float:
        """Session hangboard TLI."""
        return sum(r.total for r in self.rows)

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "total": round(self.total, 2),
            "rows": [r.to_dict() for r in self.rows],
        }


def estimate_mvc20(body_kg: float, mvc20_kg: Optional[float] = None) -> float:
    """Calibrated MVC at 20 mm, falling back to body weight + 20 kg."""
    if mvc20_kg is not None:
        return mvc20_kg
    return body_kg + MVC_BODYWEIGHT_OFFSET_KG


def compute_hangboard_set_tli(row: HangboardRow) -> HangboardSetResult:
    """
    Calculate TLI for one hangboard row.

    Args:
        row: Hang protocol

    Returns:
        HangboardSetResult (per_set and total over row.sets)

    Raises:
        ZeroDivisionError / ValueError: edge_mm <= 0 (caller error)
    """
    mvc20 = estimate_mvc20(row.body_kg, row.mvc20_kg)
    mvc_edge = mvc20 * edge_scaling(row.edge_mm, row.k_edge_exp) * grip_multiplier(row.grip)
    ri = clamp((row.body_kg + row.added_kg) / mvc_edge, 0.0, HANGBOARD_RI_CAP)

    work = row.duration_sec * row.reps
    rest = row.rest_between_reps_sec * max(0, row.reps - 1)
    df = density_factor(work, rest, row.density_exp_hb)

    return HangboardSetResult(
        per_set=ri * work * df,
        work_seconds=work,
        rest_seconds=rest,
        density_factor=df,
        relative_intensity=ri,
        mvc20_kg=mvc20,
        mvc_edge_kg=mvc_edge,
        sets=row.sets,
    )


def compute_hangboard_tli(rows: Sequence[HangboardRow]) -> HangboardSummary:
    """Calculate hangboard TLI over several rows (sum of per_set * sets)."""
    return HangboardSummary(rows=[compute_hangboard_set_tli(r) for r in rows])
