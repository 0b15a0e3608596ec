"""
Bouldering calculators.

Components:
- compute_bouldering_tli: Per-climb model with fatigue weighting (canonical)
- compute_grade_fraction_tli: Simplified grade-distribution model
"""

from .per_climb import (
    Climb,
    BoulderingParams,
    compute_bouldering_tli,
    session_rest_seconds,
)
from .grade_fraction import (
    GradeFraction,
    GradeFractionParams,
    compute_grade_fraction_tli,
    normalize_fractions,
    sum_fractions,
    work_fraction,
)

__all__ = [
    # Per-climb
    "Climb",
    "BoulderingParams",
    "compute_bouldering_tli",
    "session_rest_seconds",
    # Grade fraction
    "GradeFraction",
    "GradeFractionParams",
    "compute_grade_fraction_tli",
    "normalize_fractions",
    "sum_fractions",
    "work_fraction",
]
