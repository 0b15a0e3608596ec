"""
Hangboard schemas.

Pydantic schemas for validating hang protocols.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tendon_load.config import settings
from tendon_load.shared.constants import Grip
from .calculator import HangboardRow


class HangboardRowInput(BaseModel):
    """Hang protocol for one row (repeated for `sets` sets)."""
    model_config = ConfigDict(allow_inf_nan=False, frozen=True)

    body_kg: float = Field(default=70.0, gt=0)
    added_kg: float = Field(default=10.0, description="Negative = assistance")
    edge_mm: float = Field(default=15.0, gt=0)
    grip: Grip = Grip.HALF
    duration_sec: float = Field(default=10.0, ge=0)
    reps: int = Field(default=5, ge=1)
    rest_between_reps_sec: float = Field(default=0.0, ge=0)
    mvc20_kg: Optional[float] = Field(
        default=None,
        gt=0,
        description="Calibrated MVC at 20 mm; omit to estimate as body + 20 kg"
    )
    density_exp_hb: float = Field(
        default_factory=lambda: settings.default_density_exp_hb, ge=0
    )
    k_edge_exp: float = Field(
        default_factory=lambda: settings.default_k_edge_exp, ge=0
    )
    sets: int = Field(default=3, ge=1)

    def to_row(self) -> HangboardRow:
        """Convert to calculator input."""
        return HangboardRow(
            body_kg=self.body_kg,
            added_kg=self.added_kg,
            edge_mm=self.edge_mm,
            grip=self.grip,
            duration_sec=self.duration_sec,
            reps=self.reps,
            rest_between_reps_sec=self.rest_between_reps_sec,
            mvc20_kg=self.mvc20_kg,
            density_exp_hb=self.density_exp_hb,
            k_edge_exp=self.k_edge_exp,
            sets=self.sets,
        )
