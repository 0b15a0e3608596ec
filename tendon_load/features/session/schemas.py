"""
Session schemas.

Pydantic schema for a whole session: bouldering, hangboard rows
and the 4-week average.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from tendon_load.config import settings
from tendon_load.features.bouldering.schemas import BoulderingRequest
from tendon_load.features.hangboard.schemas import HangboardRowInput


class SessionRequest(BaseModel):
    """One climbing session."""
    model_config = ConfigDict(allow_inf_nan=False, frozen=True)

    bouldering: Optional[BoulderingRequest] = None
    hangboard: List[HangboardRowInput] = Field(default_factory=list)
    historical_average: float = Field(
        default_factory=lambda: settings.default_historical_average,
        ge=0,
        description="4-week average TLI (0 = unknown)"
    )
