from app.domain.enums import League, MatchStatus, PredictionStatus
from app.domain.match import (
    Match,
    calculate_prediction_status,
    is_prediction_open,
    is_upcoming,
)
from app.domain.query import MatchListResponse, MatchQuery
from app.domain.team import Team

__all__ = [
    "League",
    "Match",
    "MatchListResponse",
    "MatchQuery",
    "MatchStatus",
    "PredictionStatus",
    "Team",
    "calculate_prediction_status",
    "is_prediction_open",
    "is_upcoming",
]
