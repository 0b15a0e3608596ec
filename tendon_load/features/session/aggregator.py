"""
Session aggregator.

Combines bouldering and hangboard TLI and compares the total
against the climber's 4-week average.
"""

from dataclasses import dataclass

from tendon_load.shared.calculator_types import BoulderingResult
from tendon_load.shared.constants import SPIKE_RATIO
from .recommendation import RestDayRange, recommend_rest_days


@dataclass(frozen=True)
class SessionResult:
    """Session totals, spike flag and rest recommendation."""
    boulder_total: float
    hangboard_total: float
    total: float
    ratio_to_average: float
    spike_warning: bool
    recommended_rest_days: RestDayRange

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "boulder_total": round(self.boulder_total, 2),
            "hangboard_total": round(self.hangboard_total, 2),
            "total": round(self.total, 2),
            "ratio_to_average": round(self.ratio_to_average, 3),
            "spike_warning": self.spike_warning,
            "recommended_rest_days": self.recommended_rest_days.to_dict(),
        }


def compute_session(
    boulder_result: BoulderingResult,
    hangboard_total: float,
    historical_average: float,
) -> SessionResult:
    """
    Aggregate a session.

    Args:
        boulder_result: Bouldering TLI result (either mode)
        hangboard_total: Hangboard TLI over all sets and rows
        historical_average: 4-week average session TLI; <= 0 means unknown

    Returns:
        SessionResult. With no average the ratio is 1 and no spike is flagged.
    """
    total = boulder_result.total + hangboard_total

    if historical_average > 0:
        ratio = total / historical_average
    else:
        ratio = 1.0

    # Strict: exactly 1.4x the average is not a spike
    spike = historical_average > 0 and total > SPIKE_RATIO * historical_average

    return SessionResult(
        boulder_total=boulder_result.total,
        hangboard_total=hangboard_total,
        total=total,
        ratio_to_average=ratio,
        spike_warning=spike,
        recommended_rest_days=recommend_rest_days(ratio, total),
    )
