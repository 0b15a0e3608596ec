"""
Unified constants for load calculations.

This module provides a single source of truth for the coefficients used
by the bouldering, hangboard and session modules.
"""

from enum import Enum


class Grip(str, Enum):
    """
    Hangboard grip position.

    Half crimp is the calibration reference for MVC estimates.
    """
    OPEN = "open"
    HALF = "half"
    FULL = "full"


# Capacity multiplier per grip, relative to half crimp
GRIP_MULTIPLIERS: dict[Grip, float] = {
    Grip.OPEN: 0.85,
    Grip.HALF: 1.0,
    Grip.FULL: 1.1,
}


# === Relative intensity (logistic over grade headroom) ===
RI_FLOOR = 0.35
RI_SPAN = 0.75
RI_MIDPOINT = 1.5       # grade levels below v_max
RI_CAP = 1.15

# === Freshness ===
FRESHNESS_BASE = 0.85
FRESHNESS_PER_DAY = 0.02
FRESHNESS_MAX_DAYS = 10
FRESHNESS_MIN = 0.75
FRESHNESS_MAX = 1.1

# === Hangboard ===
REFERENCE_EDGE_MM = 20.0
DEFAULT_K_EDGE_EXP = 0.45
DEFAULT_DENSITY_EXP_HB = 0.5
MVC_BODYWEIGHT_OFFSET_KG = 20.0   # mvc20 fallback: body + 20 kg
HANGBOARD_RI_CAP = 1.2

# === Bouldering (grade-fraction mode) ===
SECONDS_PER_MINUTE = 60
GRADE_FRACTION_DENSITY_EXP = 0.5

# === Session ===
SPIKE_RATIO = 1.4                 # > 40% above the 4-week average
LIGHT_SESSION_TLI = 500.0         # below this, min rest days is forced to 0

# (upper bound of ratio band, min days, max days); last band is open-ended
REST_DAY_BANDS: list[tuple[float, int, int]] = [
    (0.8, 0, 1),
    (1.2, 1, 1),
    (1.6, 1, 2),
    (float("inf"), 2, 3),
]

SPIKE_MESSAGE = "Spike > 40% above 4-wk avg"
TYPICAL_MESSAGE = "Within typical range"
ADVISORY_NOTE = (
    "Educational estimates only. If pain ≥ 3/10 or morning stiffness > 24 h, "
    "reduce intensity 10–20% and prefer open/half crimp."
)
