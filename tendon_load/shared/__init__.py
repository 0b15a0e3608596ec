"""
Shared utilities (NOT feature logic).

Usage:
    from tendon_load.shared import relative_intensity, density_factor
    from tendon_load.shared.formatters import format_tli
"""
from .formulas import (
    clamp,
    relative_intensity,
    freshness_factor,
    density_factor,
    climb_weight,
    edge_scaling,
    grip_multiplier,
)
from .formatters import (
    format_tli,
    format_ratio,
    format_rest_days,
    format_percent,
)
from .constants import (
    Grip,
    GRIP_MULTIPLIERS,
    SPIKE_RATIO,
    LIGHT_SESSION_TLI,
    REST_DAY_BANDS,
)

__all__ = [
    # formulas
    "clamp",
    "relative_intensity",
    "freshness_factor",
    "density_factor",
    "climb_weight",
    "edge_scaling",
    "grip_multiplier",
    # formatters
    "format_tli",
    "format_ratio",
    "format_rest_days",
    "format_percent",
    # constants
    "Grip",
    "GRIP_MULTIPLIERS",
    "SPIKE_RATIO",
    "LIGHT_SESSION_TLI",
    "REST_DAY_BANDS",
]
