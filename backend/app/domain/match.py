"""
Match value object and the prediction status rules derived from it.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.domain.enums import League, MatchStatus, PredictionStatus
from app.domain.team import Team


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Match(BaseModel):
    """
    A scheduled fixture between two teams.

    prediction_status is derived once when the record is built (see
    calculate_prediction_status); it is not refreshed as time passes.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    home_team: Team
    away_team: Team
    kickoff_time: datetime
    status: MatchStatus
    venue: Optional[str] = None
    league: League
    season: str
    prediction_status: PredictionStatus
    prediction_deadline: datetime

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        if not value:
            raise ValueError("Match ID is required")
        return value

    @field_validator("kickoff_time", "prediction_deadline")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _check_invariants(self) -> "Match":
        if self.home_team.id == self.away_team.id:
            raise ValueError("Home and away teams cannot be the same")
        if self.prediction_deadline >= self.kickoff_time:
            raise ValueError("Prediction deadline must be before kickoff time")
        return self


def calculate_prediction_status(
    kickoff_time: datetime,
    prediction_deadline: datetime,
    match_status: MatchStatus,
    current_time: Optional[datetime] = None,
) -> PredictionStatus:
    """
    Derive whether a match still accepts predictions.

    A finished match is FINISHED whatever the clock says. Otherwise the
    deadline is inclusive: at or after it predictions are CLOSED.
    Pass current_time explicitly for deterministic results.
    """
    if match_status == MatchStatus.FINISHED:
        return PredictionStatus.FINISHED

    now = ensure_utc(current_time) if current_time is not None else utc_now()
    if now >= ensure_utc(prediction_deadline):
        return PredictionStatus.CLOSED

    return PredictionStatus.ACCEPTING


def is_upcoming(kickoff_time: datetime, current_time: Optional[datetime] = None) -> bool:
    now = ensure_utc(current_time) if current_time is not None else utc_now()
    return ensure_utc(kickoff_time) > now


def is_prediction_open(prediction_status: PredictionStatus) -> bool:
    return prediction_status == PredictionStatus.ACCEPTING
