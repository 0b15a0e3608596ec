"""
Bouldering Service

Routes a validated bouldering request to the calculator for its mode.
"""

import logging

from tendon_load.shared.calculator_types import BoulderingMode, BoulderingResult
from .calculators import compute_bouldering_tli, compute_grade_fraction_tli
from .schemas import BoulderingRequest

logger = logging.getLogger(__name__)


class BoulderingService:
    """
    Service for bouldering TLI.

    Both modes stay explicit: per_climb (canonical) and grade_fraction.

    Example usage:
        result = BoulderingService.calculate(request)
    """

    @staticmethod
    def calculate(request: BoulderingRequest) -> BoulderingResult:
        """
        Calculate bouldering TLI for the request's mode.

        Args:
            request: Validated bouldering request

        Returns:
            BoulderingResult
        """
        if request.mode == BoulderingMode.GRADE_FRACTION:
            params = request.grade_fraction.to_params()
            logger.debug(
                f"Grade-fraction mode: {params.total_minutes} min, "
                f"R={params.work_rest_ratio}, {len(params.grade_fractions)} grades"
            )
            result = compute_grade_fraction_tli(params)
        else:
            params = request.per_climb.to_params()
            logger.debug(
                f"Per-climb mode: {len(params.climbs)} climbs, v_max={params.v_max}, "
                f"fatigue_rate={params.fatigue_rate}"
            )
            result = compute_bouldering_tli(params)

        logger.debug(
            f"Bouldering TLI={result.total:.2f} "
            f"(FR={result.freshness_factor:.3f}, DF={result.density_factor:.3f})"
        )
        return result
