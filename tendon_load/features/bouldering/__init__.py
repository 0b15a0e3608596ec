"""
Bouldering load module.

Usage:
    from tendon_load.features.bouldering import BoulderingService, BoulderingRequest
    from tendon_load.features.bouldering.calculators import compute_bouldering_tli
"""

from .schemas import (
    BoulderingRequest,
    PerClimbRequest,
    GradeFractionRequest,
    ClimbInput,
    GradeFractionInput,
)
from .service import BoulderingService

__all__ = [
    # Schemas
    "BoulderingRequest",
    "PerClimbRequest",
    "GradeFractionRequest",
    "ClimbInput",
    "GradeFractionInput",
    # Service
    "BoulderingService",
]
