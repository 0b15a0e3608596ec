"""
Session Service

Orchestrates all load components for one session:
- Bouldering TLI (per-climb or grade-fraction mode)
- Hangboard TLI for every row
- Session aggregation and rest-day recommendation

This is the main entry point for evaluating a session.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from tendon_load.shared.calculator_types import BoulderingResult
from tendon_load.shared.constants import ADVISORY_NOTE, SPIKE_MESSAGE, TYPICAL_MESSAGE
from tendon_load.features.bouldering.service import BoulderingService
from tendon_load.features.hangboard.calculator import HangboardSummary, compute_hangboard_tli
from .aggregator import SessionResult, compute_session
from .schemas import SessionRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionReport:
    """Complete result of a session evaluation."""
    bouldering: BoulderingResult
    hangboard: HangboardSummary
    session: SessionResult
    historical_average: float
    status: Optional[str]
    advisory: str = ADVISORY_NOTE

    def to_dict(self) -> dict:
        """Convert to dict for output."""
        return {
            "bouldering": self.bouldering.to_dict(),
            "hangboard": self.hangboard.to_dict(),
            "session": self.session.to_dict(),
            "historical_average": self.historical_average,
            "status": self.status,
            "advisory": self.advisory,
        }


def status_message(result: SessionResult, historical_average: float) -> Optional[str]:
    """Spike badge text, or None when there is no average to compare with."""
    if historical_average <= 0:
        return None
    return SPIKE_MESSAGE if result.spike_warning else TYPICAL_MESSAGE


class SessionService:
    """
    Main service for session evaluation.

    Example usage:
        report = SessionService.evaluate(SessionRequest(...))
        print(report.session.total)
    """

    @staticmethod
    def evaluate(request: SessionRequest) -> SessionReport:
        """
        Evaluate a session.

        Args:
            request: Validated session request

        Returns:
            SessionReport with every intermediate result
        """
        if request.bouldering is not None:
            bouldering = BoulderingService.calculate(request.bouldering)
        else:
            bouldering = BoulderingResult.empty()

        hangboard = compute_hangboard_tli([row.to_row() for row in request.hangboard])
        logger.debug(f"Hangboard TLI={hangboard.total:.2f} over {len(hangboard.rows)} rows")

        result = compute_session(bouldering, hangboard.total, request.historical_average)

        logger.info(
            f"Session TLI={result.total:.1f} "
            f"(boulder={result.boulder_total:.1f}, hangboard={result.hangboard_total:.1f}), "
            f"ratio={result.ratio_to_average:.2f}, "
            f"rest={result.recommended_rest_days.min}-{result.recommended_rest_days.max} days"
        )
        if result.spike_warning:
            logger.warning(
                f"Load spike: {result.total:.1f} > "
                f"1.4 x 4-week average {request.historical_average:.1f}"
            )

        return SessionReport(
            bouldering=bouldering,
            hangboard=hangboard,
            session=result,
            historical_average=request.historical_average,
            status=status_message(result, request.historical_average),
        )
