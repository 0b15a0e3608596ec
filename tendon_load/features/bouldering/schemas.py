"""
Bouldering schemas.

Pydantic schemas for validating caller input before it reaches
the calculators.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tendon_load.config import settings
from tendon_load.shared.calculator_types import BoulderingMode
from .calculators import BoulderingParams, Climb, GradeFraction, GradeFractionParams


class _FiniteModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False, frozen=True)


class ClimbInput(_FiniteModel):
    """Single climb."""
    grade: float = Field(..., description="V-scale grade, may be fractional")
    tut_sec: float = Field(..., ge=0, description="Time under tension, seconds")


class PerClimbRequest(_FiniteModel):
    """Per-climb bouldering session."""
    v_max: float = 8.0
    rest_days: float = Field(default=2.0, ge=0)
    avg_rest_between_climbs_sec: float = Field(default=90.0, ge=0)
    density_exp: float = Field(
        default_factory=lambda: settings.default_density_exp, ge=0
    )
    use_density: bool = True
    fatigue_rate: float = Field(
        default_factory=lambda: settings.default_fatigue_rate, ge=0
    )
    climbs: List[ClimbInput] = Field(default_factory=list)

    def to_params(self) -> BoulderingParams:
        """Convert to calculator input."""
        return BoulderingParams(
            v_max=self.v_max,
            rest_days=self.rest_days,
            avg_rest_between_climbs_sec=self.avg_rest_between_climbs_sec,
            density_exp=self.density_exp,
            use_density=self.use_density,
            fatigue_rate=self.fatigue_rate,
            climbs=tuple(Climb(grade=c.grade, tut_sec=c.tut_sec) for c in self.climbs),
        )


class GradeFractionInput(_FiniteModel):
    """Share of work at one grade."""
    grade: float
    fraction: float = Field(..., ge=0, le=1)


def _default_fractions() -> List[GradeFractionInput]:
    return [
        GradeFractionInput(grade=6, fraction=0.4),
        GradeFractionInput(grade=7, fraction=0.4),
        GradeFractionInput(grade=8, fraction=0.2),
    ]


class GradeFractionRequest(_FiniteModel):
    """Grade-distribution bouldering session."""
    v_max: float = 8.0
    total_minutes: float = Field(default=90.0, ge=0)
    work_rest_ratio: float = Field(
        default=0.5, ge=0, description="R = work/rest; 0.5 = 1:2, 1 = 1:1, 2 = 2:1"
    )
    use_density: bool = False
    grade_fractions: List[GradeFractionInput] = Field(default_factory=_default_fractions)

    def to_params(self) -> GradeFractionParams:
        """Convert to calculator input."""
        return GradeFractionParams(
            v_max=self.v_max,
            total_minutes=self.total_minutes,
            work_rest_ratio=self.work_rest_ratio,
            use_density=self.use_density,
            grade_fractions=tuple(
                GradeFraction(grade=g.grade, fraction=g.fraction)
                for g in self.grade_fractions
            ),
        )


class BoulderingRequest(_FiniteModel):
    """Bouldering part of a session in one of the two modes."""
    mode: BoulderingMode = BoulderingMode.PER_CLIMB
    per_climb: Optional[PerClimbRequest] = None
    grade_fraction: Optional[GradeFractionRequest] = None

    @model_validator(mode='after')
    def check_mode_payload(self) -> "BoulderingRequest":
        """The payload for the selected mode must be present."""
        if self.mode == BoulderingMode.PER_CLIMB and self.per_climb is None:
            raise ValueError("mode 'per_climb' requires a 'per_climb' section")
        if self.mode == BoulderingMode.GRADE_FRACTION and self.grade_fraction is None:
            raise ValueError("mode 'grade_fraction' requires a 'grade_fraction' section")
        return self
