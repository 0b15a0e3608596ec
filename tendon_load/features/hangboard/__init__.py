"""
Hangboard load module.

Usage:
    from tendon_load.features.hangboard import HangboardRow, compute_hangboard_set_tli
"""

from .calculator import (
    HangboardRow,
    HangboardSetResult,
    HangboardSummary,
    compute_hangboard_set_tli,
    compute_hangboard_tli,
    estimate_mvc20,
)
from .schemas import HangboardRowInput

__all__ = [
    # Calculator
    "HangboardRow",
    "HangboardSetResult",
    "HangboardSummary",
    "compute_hangboard_set_tli",
    "compute_hangboard_tli",
    "estimate_mvc20",
    # Schemas
    "HangboardRowInput",
]
