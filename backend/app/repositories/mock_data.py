"""
Generated reference dataset for development and demos.

All randomness comes from a random.Random instance, so passing a seed makes
the dataset reproducible.
"""
import random
from datetime import datetime, timedelta
from typing import List, Optional

from app.domain.enums import League, MatchStatus
from app.domain.match import Match, calculate_prediction_status, ensure_utc, utc_now
from app.domain.team import Team

SEASON = "2024-25"
DEFAULT_MATCH_COUNT = 20
PREDICTION_WINDOW_CLOSES = timedelta(hours=1)


def generate_mock_teams() -> List[Team]:
    return [
        # Premier League
        Team(id="arsenal", name="Arsenal", short_name="ARS", logo="/logos/arsenal.png",
             league=League.PREMIER_LEAGUE.value, country="England"),
        Team(id="chelsea", name="Chelsea", short_name="CHE", logo="/logos/chelsea.png",
             league=League.PREMIER_LEAGUE.value, country="England"),
        Team(id="liverpool", name="Liverpool", short_name="LIV", logo="/logos/liverpool.png",
             league=League.PREMIER_LEAGUE.value, country="England"),
        Team(id="manchester-city", name="Manchester City", short_name="MCI",
             logo="/logos/man-city.png", league=League.PREMIER_LEAGUE.value, country="England"),
        # La Liga
        Team(id="real-madrid", name="Real Madrid", short_name="RMA",
             logo="/logos/real-madrid.png", league=League.LA_LIGA.value, country="Spain"),
        Team(id="barcelona", name="FC Barcelona", short_name="BAR",
             logo="/logos/barcelona.png", league=League.LA_LIGA.value, country="Spain"),
        # Bundesliga
        Team(id="bayern-munich", name="Bayern Munich", short_name="BAY",
             logo="/logos/bayern.png", league=League.BUNDESLIGA.value, country="Germany"),
        Team(id="borussia-dortmund", name="Borussia Dortmund", short_name="BVB",
             logo="/logos/dortmund.png", league=League.BUNDESLIGA.value, country="Germany"),
    ]


def _status_for_index(index: int, count: int) -> MatchStatus:
    # 75% scheduled, 15% live, the rest finished (15/3/2 for twenty matches)
    if index < count * 3 // 4:
        return MatchStatus.SCHEDULED
    if index < count * 9 // 10:
        return MatchStatus.LIVE
    return MatchStatus.FINISHED


def generate_mock_matches(
    now: Optional[datetime] = None,
    count: int = DEFAULT_MATCH_COUNT,
    seed: Optional[int] = None,
) -> List[Match]:
    """
    Build `count` matches spread over the coming days, roughly one every
    twelve hours, each closing for predictions an hour before kickoff.
    """
    now = ensure_utc(now) if now is not None else utc_now()
    rng = random.Random(seed)
    teams = generate_mock_teams()

    matches = []
    for i in range(count):
        kickoff_time = now + timedelta(hours=i * 12 + rng.random() * 12)
        prediction_deadline = kickoff_time - PREDICTION_WINDOW_CLOSES

        home_team = rng.choice(teams)
        away_team = rng.choice(teams)
        while away_team.id == home_team.id:
            away_team = rng.choice(teams)

        status = _status_for_index(i, count)

        matches.append(Match(
            id=f"match-{i + 1}",
            home_team=home_team,
            away_team=away_team,
            kickoff_time=kickoff_time,
            status=status,
            venue=f"Stadium {i + 1}",
            league=League(home_team.league),
            season=SEASON,
            prediction_status=calculate_prediction_status(
                kickoff_time, prediction_deadline, status, now
            ),
            prediction_deadline=prediction_deadline,
        ))

    return matches
