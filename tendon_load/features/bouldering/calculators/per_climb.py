"""
Per-climb bouldering load.

Each climb contributes RI(v_max - grade) * TUT, weighted by its position
in the session. Session-level freshness and density factors scale the sum.

Example (v_max=8, 2 rest days, 90s between climbs, density 0.5, fatigue 0.02):
    V6 25s, V7 30s, V8 35s -> sum ~72.24, FR 0.89, DF ~0.577 -> TLI ~37.12
"""

from dataclasses import dataclass, field
from typing import Tuple

from tendon_load.shared.calculator_types import (
    BoulderingMode,
    BoulderingResult,
    ClimbContribution,
)
from tendon_load.shared.formulas import (
    relative_intensity,
    freshness_factor,
    density_factor,
    climb_weight,
)


@dataclass(frozen=True)
class Climb:
    """One climb: V-grade (may be fractional) and time under tension."""
    grade: float
    tut_sec: float


@dataclass(frozen=True)
class BoulderingParams:
    """Inputs for per-climb bouldering load. Climb order matters."""
    v_max: float
    rest_days: float
    avg_rest_between_climbs_sec: float
    density_exp: float
    use_density: bool
    fatigue_rate: float
    climbs: Tuple[Climb, ...] = field(default_factory=tuple)


def session_rest_seconds(climb_count: int, avg_rest_sec: float) -> float:
    """Estimated rest inside the session: (n - 1) gaps between n climbs."""
    return max(0.0, (climb_count - 1) * max(0.0, avg_rest_sec))


def compute_bouldering_tli(params: BoulderingParams) -> BoulderingResult:
    """
    Calculate bouldering TLI from an ordered list of climbs.

    Args:
        params: Session parameters and climbs

    Returns:
        BoulderingResult with total and intermediate metrics
    """
    climbs = list(params.climbs)

    total_tut = sum(max(0.0, c.tut_sec) for c in climbs)
    total_rest_within = session_rest_seconds(
        len(climbs), params.avg_rest_between_climbs_sec
    )

    fr = freshness_factor(params.rest_days)
    if params.use_density:
        df = density_factor(total_tut, total_rest_within, params.density_exp)
    else:
        df = 1.0

    contributions = []
    for position, climb in enumerate(climbs, start=1):
        delta = params.v_max - climb.grade
        ri = relative_intensity(delta)
        weight = climb_weight(position, params.fatigue_rate)
        tut = max(0.0, climb.tut_sec)
        contributions.append(ClimbContribution(
            position=position,
            grade=climb.grade,
            delta=delta,
            relative_intensity=ri,
            weight=weight,
            tut_sec=tut,
            contribution=ri * tut * weight,
        ))

    raw = sum(c.contribution for c in contributions)

    return BoulderingResult(
        total=fr * df * raw,
        total_tut=total_tut,
        total_rest_within=total_rest_within,
        freshness_factor=fr,
        density_factor=df,
        mode=BoulderingMode.PER_CLIMB,
        contributions=contributions,
    )
