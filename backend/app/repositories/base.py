from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from app.domain.enums import SUPPORTED_LEAGUES, League
from app.domain.match import Match
from app.domain.query import MatchListResponse, MatchQuery

DEFAULT_PAGE_LIMIT = 20
DEFAULT_VIEW_LIMIT = 10


class MatchRepository(ABC):
    """
    Read-only query contract over a match collection.

    Implementations never mutate the collection and never fail on a
    well-formed query. Results are ordered by kickoff time ascending with
    ties kept in collection order.
    """

    @abstractmethod
    def find_matches(self, query: MatchQuery) -> MatchListResponse:
        """Filter by league/status, sort by kickoff, return one page."""

    @abstractmethod
    def find_by_id(self, match_id: str) -> Optional[Match]:
        """Exact id lookup; None when the match does not exist."""

    @abstractmethod
    def find_upcoming_by_league(
        self,
        league: League,
        limit: int = DEFAULT_VIEW_LIMIT,
        now: Optional[datetime] = None,
    ) -> List[Match]:
        """Matches of a league kicking off strictly after now."""

    @abstractmethod
    def find_accepting_predictions(self, limit: int = DEFAULT_VIEW_LIMIT) -> List[Match]:
        """Matches whose prediction status is ACCEPTING."""

    def find_many(self, match_ids: Sequence[str]) -> List[Match]:
        """Look up several ids, keeping request order and skipping unknown ones."""
        matches = []
        for match_id in match_ids:
            match = self.find_by_id(match_id)
            if match is not None:
                matches.append(match)
        return matches

    def get_supported_leagues(self) -> List[League]:
        return list(SUPPORTED_LEAGUES)
