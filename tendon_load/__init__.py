"""
Tendon Load Index

Finger/tendon load estimates for bouldering and hangboard sessions.

Usage:
    from tendon_load import compute_bouldering_tli, compute_hangboard_set_tli, compute_session
"""

from tendon_load.features.bouldering.calculators import (
    Climb,
    BoulderingParams,
    GradeFraction,
    GradeFractionParams,
    compute_bouldering_tli,
    compute_grade_fraction_tli,
)
from tendon_load.features.hangboard.calculator import (
    HangboardRow,
    compute_hangboard_set_tli,
    compute_hangboard_tli,
)
from tendon_load.features.session.aggregator import SessionResult, compute_session
from tendon_load.features.session.recommendation import RestDayRange, recommend_rest_days
from tendon_load.shared.calculator_types import BoulderingMode, BoulderingResult
from tendon_load.shared.constants import Grip

__version__ = "0.1.0"

__all__ = [
    "Climb",
    "BoulderingParams",
    "GradeFraction",
    "GradeFractionParams",
    "BoulderingMode",
    "BoulderingResult",
    "compute_bouldering_tli",
    "compute_grade_fraction_tli",
    "Grip",
    "HangboardRow",
    "compute_hangboard_set_tli",
    "compute_hangboard_tli",
    "SessionResult",
    "RestDayRange",
    "compute_session",
    "recommend_rest_days",
]
