from enum import Enum


class League(str, Enum):
    PREMIER_LEAGUE = "PREMIER_LEAGUE"
    LA_LIGA = "LA_LIGA"
    BUNDESLIGA = "BUNDESLIGA"
    SERIE_A = "SERIE_A"
    LIGUE_1 = "LIGUE_1"


class MatchStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    LIVE = "LIVE"
    FINISHED = "FINISHED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"


class PredictionStatus(str, Enum):
    ACCEPTING = "ACCEPTING"  # predictions open
    CLOSED = "CLOSED"  # deadline passed
    FINISHED = "FINISHED"  # result settled


SUPPORTED_LEAGUES = (
    League.PREMIER_LEAGUE,
    League.LA_LIGA,
    League.BUNDESLIGA,
    League.SERIE_A,
    League.LIGUE_1,
)
