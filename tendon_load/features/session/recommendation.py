"""
Rest-day recommendation.

Step function of the session's ratio to the 4-week average:

    ratio < 0.8        -> 0-1 days
    0.8 <= ratio < 1.2 -> 1 day
    1.2 <= ratio < 1.6 -> 1-2 days
    ratio >= 1.6       -> 2-3 days

Sessions under 500 TLI always allow training the next day (min = 0),
even when a low average inflates the ratio.

Thresholds are a heuristic, not a physiological model. Keep them as is.
"""

from dataclasses import dataclass

from tendon_load.shared.constants import LIGHT_SESSION_TLI, REST_DAY_BANDS


@dataclass(frozen=True)
class RestDayRange:
    """Recommended rest before the next hard session."""
    min: int
    max: int

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max}


def recommend_rest_days(ratio_to_average: float, total: float) -> RestDayRange:
    """
    Recommend rest days for a session.

    Args:
        ratio_to_average: Session TLI / 4-week average TLI
        total: Session TLI

    Returns:
        RestDayRange(min, max)
    """
    min_days, max_days = REST_DAY_BANDS[-1][1:]
    for upper, band_min, band_max in REST_DAY_BANDS:
        if ratio_to_average < upper:
            min_days, max_days = band_min, band_max
            break

    if total < LIGHT_SESSION_TLI:
        min_days = 0

    return RestDayRange(min=min_days, max=max_days)
