import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from app.domain.enums import League, PredictionStatus
from app.domain.match import Match, ensure_utc, utc_now
from app.domain.query import MatchListResponse, MatchQuery
from app.repositories.base import (
    DEFAULT_PAGE_LIMIT,
    DEFAULT_VIEW_LIMIT,
    MatchRepository,
)

logger = logging.getLogger(__name__)


class MatchStore:
    """Immutable snapshot of the canonical match collection."""

    def __init__(self, matches: Iterable[Match]):
        self._matches: Tuple[Match, ...] = tuple(matches)
        self._by_id = {match.id: match for match in self._matches}
        logger.info("Match store initialised with %d matches", len(self._matches))

    @property
    def matches(self) -> Tuple[Match, ...]:
        return self._matches

    def get(self, match_id: str) -> Optional[Match]:
        return self._by_id.get(match_id)

    def __len__(self) -> int:
        return len(self._matches)


def _by_kickoff(matches: Iterable[Match]) -> List[Match]:
    # sorted() is stable: equal kickoff times keep store order
    return sorted(matches, key=lambda match: match.kickoff_time)


class InMemoryMatchRepository(MatchRepository):
    """Query engine over a MatchStore snapshot."""

    def __init__(self, store: MatchStore, default_limit: int = DEFAULT_PAGE_LIMIT):
        self.store = store
        self.default_limit = default_limit

    def _select(self, predicate: Callable[[Match], bool]) -> List[Match]:
        return _by_kickoff(match for match in self.store.matches if predicate(match))

    def find_matches(self, query: MatchQuery) -> MatchListResponse:
        def matches_query(match: Match) -> bool:
            if query.league is not None and match.league != query.league:
                return False
            if query.status is not None and match.prediction_status != query.status:
                return False
            return True

        filtered = self._select(matches_query)

        offset = query.offset if query.offset is not None else 0
        limit = query.limit if query.limit is not None else self.default_limit
        total = len(filtered)

        return MatchListResponse(
            matches=filtered[offset:offset + limit],
            total=total,
            has_more=offset + limit < total,
        )

    def find_by_id(self, match_id: str) -> Optional[Match]:
        return self.store.get(match_id)

    def find_upcoming_by_league(
        self,
        league: League,
        limit: int = DEFAULT_VIEW_LIMIT,
        now: Optional[datetime] = None,
    ) -> List[Match]:
        current = ensure_utc(now) if now is not None else utc_now()
        upcoming = self._select(
            lambda match: match.league == league and match.kickoff_time > current
        )
        return upcoming[:limit]

    def find_accepting_predictions(self, limit: int = DEFAULT_VIEW_LIMIT) -> List[Match]:
        accepting = self._select(
            lambda match: match.prediction_status == PredictionStatus.ACCEPTING
        )
        return accepting[:limit]
