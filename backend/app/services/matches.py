from datetime import datetime
from typing import List, Optional, Sequence

from app.core.errors import QueryValidationError
from app.domain.enums import League
from app.domain.match import Match
from app.domain.query import MatchListResponse, MatchQuery
from app.repositories.base import DEFAULT_VIEW_LIMIT, MatchRepository

MIN_LIMIT = 1
MAX_LIMIT = 100


class MatchService:
    """Match listing use cases on top of a MatchRepository."""

    def __init__(self, repository: MatchRepository, max_limit: int = MAX_LIMIT):
        self.repository = repository
        self.max_limit = max_limit

    def validate(self, query: MatchQuery) -> None:
        if query.limit is not None and not MIN_LIMIT <= query.limit <= self.max_limit:
            raise QueryValidationError(
                f"Limit must be between {MIN_LIMIT} and {self.max_limit}"
            )
        if query.offset is not None and query.offset < 0:
            raise QueryValidationError("Offset must be non-negative")

    def execute(self, query: MatchQuery) -> MatchListResponse:
        """Validate the query, then return the requested page."""
        self.validate(query)
        return self.repository.find_matches(query)

    def get_upcoming_matches(
        self,
        league: Optional[League] = None,
        limit: int = DEFAULT_VIEW_LIMIT,
        now: Optional[datetime] = None,
    ) -> MatchListResponse:
        """
        Upcoming matches for one league, or the first page of all matches
        when no league is given. `now` defaults to the current time.
        """
        if league is None:
            return self.execute(MatchQuery(limit=limit))

        self.validate(MatchQuery(limit=limit))
        # Ask for one extra row to learn whether the list was truncated
        matches = self.repository.find_upcoming_by_league(league, limit + 1, now=now)
        return self._truncated(matches, limit)

    def get_accepting_predictions(self, limit: int = DEFAULT_VIEW_LIMIT) -> MatchListResponse:
        self.validate(MatchQuery(limit=limit))
        matches = self.repository.find_accepting_predictions(limit + 1)
        return self._truncated(matches, limit)

    def get_supported_leagues(self) -> List[League]:
        return self.repository.get_supported_leagues()

    def get_match(self, match_id: str) -> Optional[Match]:
        return self.repository.find_by_id(match_id)

    def get_matches(self, match_ids: Sequence[str]) -> List[Match]:
        return self.repository.find_many(match_ids)

    @staticmethod
    def _truncated(matches: List[Match], limit: int) -> MatchListResponse:
        page = matches[:limit]
        return MatchListResponse(
            matches=page,
            total=len(page),
            has_more=len(matches) > limit,
        )
