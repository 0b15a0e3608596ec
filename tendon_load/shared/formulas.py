"""
Mathematical formulas for tendon load calculations.

These formulas are used by the bouldering and hangboard modules.
Centralizing them here eliminates duplication and ensures consistency.
"""

import math

from .constants import (
    Grip,
    GRIP_MULTIPLIERS,
    RI_FLOOR,
    RI_SPAN,
    RI_MIDPOINT,
    RI_CAP,
    FRESHNESS_BASE,
    FRESHNESS_PER_DAY,
    FRESHNESS_MAX_DAYS,
    FRESHNESS_MIN,
    FRESHNESS_MAX,
    REFERENCE_EDGE_MM,
    DEFAULT_K_EDGE_EXP,
)


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit value to the [lo, hi] range."""
    return min(hi, max(lo, value))


def _inverse_logistic(x: float) -> float:
    """1 / (1 + e^x) without overflowing for large |x|."""
    if x > 0:
        z = math.exp(-x)
        return z / (1.0 + z)
    return 1.0 / (1.0 + math.exp(x))


def relative_intensity(delta: float) -> float:
    """
    Relative intensity of a climb from its grade headroom.

    Formula: RI = clamp(0.35 + 0.75 / (1 + exp(delta - 1.5)), 0, 1.15)

    Args:
        delta: v_max - climb grade (positive = below max)

    Returns:
        Unitless multiplier in [0, 1.15]

    Notes:
        - Climbs far below max approach the 0.35 floor
        - Climbs at or above max approach 1.1 and are capped at 1.15
        - Midpoint offset by 1.5 grades, so a climb at max sits
          in the upper-middle of the curve
    """
    ri = RI_FLOOR + RI_SPAN * _inverse_logistic(delta - RI_MIDPOINT)
    return clamp(ri, 0.0, RI_CAP)


def freshness_factor(rest_days: float) -> float:
    """
    Capacity modifier from days rested since the last hard session.

    Formula: FR = clamp(0.85 + 0.02 * min(max(rest_days, 0), 10), 0.75, 1.1)

    Zero rest -> 0.85, 10+ days -> 1.05.
    """
    days = min(max(rest_days, 0), FRESHNESS_MAX_DAYS)
    return clamp(FRESHNESS_BASE + FRESHNESS_PER_DAY * days, FRESHNESS_MIN, FRESHNESS_MAX)


def density_factor(work_seconds: float, rest_seconds: float, exponent: float) -> float:
    """
    Credit for how compressed (rest-starved) the work was.

    Formula: DF = (work / max(1, work + rest)) ^ exponent

    Args:
        work_seconds: Time under tension
        rest_seconds: Rest between efforts
        exponent: 0 disables the effect, 1 is linear

    Returns:
        Factor in [0, 1] for non-negative inputs
    """
    ratio = work_seconds / max(1.0, work_seconds + rest_seconds)
    return math.pow(ratio, exponent)


def climb_weight(position: int, fatigue_rate: float) -> float:
    """
    Order-sensitive weight of a climb within the session.

    Args:
        position: 1-indexed position in the climb list (list order, not grade order)
        fatigue_rate: Decay constant; <= 0 disables weighting

    Returns:
        exp(-fatigue_rate * (position - 1)), first climb always 1.0
    """
    if fatigue_rate <= 0:
        return 1.0
    return math.exp(-fatigue_rate * (position - 1))


def edge_scaling(edge_mm: float, k: float = DEFAULT_K_EDGE_EXP) -> float:
    """
    Capacity scaling from the 20 mm reference edge to another depth.

    Formula: (20 / edge_mm) ^ k

    edge_mm must be > 0: zero raises ZeroDivisionError and a negative
    edge raises ValueError (math domain error).
    """
    return math.pow(REFERENCE_EDGE_MM / edge_mm, k)


def grip_multiplier(grip: Grip) -> float:
    """Capacity multiplier for a grip (half crimp = 1.0)."""
    return GRIP_MULTIPLIERS[Grip(grip)]
