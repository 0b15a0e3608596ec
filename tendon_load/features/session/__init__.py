"""
Session aggregation module.

Usage:
    from tendon_load.features.session import SessionService, SessionRequest
    from tendon_load.features.session import compute_session, recommend_rest_days
"""

from .recommendation import RestDayRange, recommend_rest_days
from .aggregator import SessionResult, compute_session
from .schemas import SessionRequest
from .service import SessionService, SessionReport, status_message

__all__ = [
    # Recommendation
    "RestDayRange",
    "recommend_rest_days",
    # Aggregator
    "SessionResult",
    "compute_session",
    # Schemas
    "SessionRequest",
    # Service
    "SessionService",
    "SessionReport",
    "status_message",
]
