# Ensure backend is on sys.path so `app` imports resolve from repo root or backend dir
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent
_str_backend = str(_backend)
if _str_backend not in sys.path:
    sys.path.insert(0, _str_backend)

import pytest

from app.domain.enums import League, MatchStatus
from app.domain.match import Match, calculate_prediction_status
from app.domain.team import Team

REFERENCE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

TEAMS = {
    "arsenal": Team(id="arsenal", name="Arsenal", short_name="ARS",
                    logo="/logos/arsenal.png", league="PREMIER_LEAGUE", country="England"),
    "chelsea": Team(id="chelsea", name="Chelsea", short_name="CHE",
                    logo="/logos/chelsea.png", league="PREMIER_LEAGUE", country="England"),
    "real-madrid": Team(id="real-madrid", name="Real Madrid", short_name="RMA",
                        logo="/logos/real-madrid.png", league="LA_LIGA", country="Spain"),
    "barcelona": Team(id="barcelona", name="FC Barcelona", short_name="BAR",
                      logo="/logos/barcelona.png", league="LA_LIGA", country="Spain"),
    "bayern-munich": Team(id="bayern-munich", name="Bayern Munich", short_name="BAY",
                          logo="/logos/bayern.png", league="BUNDESLIGA", country="Germany"),
    "borussia-dortmund": Team(id="borussia-dortmund", name="Borussia Dortmund", short_name="BVB",
                              logo="/logos/dortmund.png", league="BUNDESLIGA", country="Germany"),
}

LEAGUE_TEAMS = {
    League.PREMIER_LEAGUE: ("arsenal", "chelsea"),
    League.LA_LIGA: ("real-madrid", "barcelona"),
    League.BUNDESLIGA: ("bayern-munich", "borussia-dortmund"),
}


def build_match(
    match_id: str,
    league: League = League.PREMIER_LEAGUE,
    kickoff_in_hours: float = 24,
    status: MatchStatus = MatchStatus.SCHEDULED,
    now: datetime = REFERENCE_TIME,
) -> Match:
    """Match kicking off `kickoff_in_hours` after `now`, closing an hour earlier."""
    home_id, away_id = LEAGUE_TEAMS[league]
    kickoff_time = now + timedelta(hours=kickoff_in_hours)
    deadline = kickoff_time - timedelta(hours=1)
    return Match(
        id=match_id,
        home_team=TEAMS[home_id],
        away_team=TEAMS[away_id],
        kickoff_time=kickoff_time,
        status=status,
        venue=f"Stadium {match_id}",
        league=league,
        season="2024-25",
        prediction_status=calculate_prediction_status(kickoff_time, deadline, status, now),
        prediction_deadline=deadline,
    )


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture
def sample_matches() -> list:
    """
    Eleven matches in deliberately unsorted store order.

    m-tie-a / m-tie-b / m-tie-c share a kickoff time. m-past and m-live are
    CLOSED, m-done is FINISHED, the rest are ACCEPTING. No Serie A or Ligue 1.
    """
    return [
        build_match("m-5", League.PREMIER_LEAGUE, 60),
        build_match("m-tie-a", League.LA_LIGA, 36),
        build_match("m-1", League.PREMIER_LEAGUE, 12),
        build_match("m-tie-b", League.PREMIER_LEAGUE, 36),
        build_match("m-past", League.BUNDESLIGA, -2),
        build_match("m-done", League.PREMIER_LEAGUE, -30, MatchStatus.FINISHED),
        build_match("m-tie-c", League.BUNDESLIGA, 36),
        build_match("m-7", League.LA_LIGA, 84),
        build_match("m-2", League.BUNDESLIGA, 24),
        build_match("m-6", League.PREMIER_LEAGUE, 72),
        build_match("m-live", League.LA_LIGA, 0.5, MatchStatus.LIVE),
    ]
