"""
Grade-fraction bouldering load (simplified mode).

Instead of a climb list, the session is described by its length, a
work:rest ratio R and the share of work spent at each grade:

    fw = R / (1 + R)
    work_seconds = total_minutes * 60 * fw
    DF = fw ^ 0.5 (if enabled)
    TLI = DF * sum(RI(v_max - grade) * work_seconds * fraction)

No freshness or fatigue terms apply in this mode.
"""

import math
from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple

from tendon_load.shared.calculator_types import BoulderingMode, BoulderingResult
from tendon_load.shared.constants import SECONDS_PER_MINUTE, GRADE_FRACTION_DENSITY_EXP
from tendon_load.shared.formulas import relative_intensity


@dataclass(frozen=True)
class GradeFraction:
    """Share of the session's work spent at one grade."""
    grade: float
    fraction: float


@dataclass(frozen=True)
class GradeFractionParams:
    """Inputs for grade-fraction bouldering load."""
    v_max: float
    total_minutes: float
    work_rest_ratio: float      # R = work / rest (0.5 means 1:2)
    use_density: bool
    grade_fractions: Tuple[GradeFraction, ...] = field(default_factory=tuple)


def sum_fractions(rows: Sequence[GradeFraction]) -> float:
    """Sum of finite fractions."""
    return sum(r.fraction for r in rows if math.isfinite(r.fraction))


def normalize_fractions(rows: Sequence[GradeFraction]) -> List[GradeFraction]:
    """
    Rescale fractions to sum to 1.

    A non-positive sum leaves fractions unchanged (divides by 1).
    """
    total = sum_fractions(rows)
    divisor = total if total > 0 else 1.0
    return [replace(r, fraction=r.fraction / divisor) for r in rows]


def work_fraction(work_rest_ratio: float) -> float:
    """fw = R / (1 + R): share of session time spent working."""
    return work_rest_ratio / (1 + work_rest_ratio)


def compute_grade_fraction_tli(params: GradeFractionParams) -> BoulderingResult:
    """
    Calculate bouldering TLI from a grade distribution.

    Args:
        params: Session length, work:rest ratio and grade fractions

    Returns:
        BoulderingResult (total_tut = derived work seconds)
    """
    fw = work_fraction(params.work_rest_ratio)
    session_seconds = params.total_minutes * SECONDS_PER_MINUTE
    work_seconds = session_seconds * fw
    df = math.pow(fw, GRADE_FRACTION_DENSITY_EXP) if params.use_density else 1.0

    raw = 0.0
    for row in normalize_fractions(params.grade_fractions):
        ri = relative_intensity(params.v_max - row.grade)
        raw += ri * (work_seconds * row.fraction)

    return BoulderingResult(
        total=df * raw,
        total_tut=work_seconds,
        total_rest_within=session_seconds - work_seconds,
        freshness_factor=1.0,
        density_factor=df,
        mode=BoulderingMode.GRADE_FRACTION,
    )
