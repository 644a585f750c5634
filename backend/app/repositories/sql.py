import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import StoreUnavailableError
from app.domain.enums import League, MatchStatus, PredictionStatus
from app.domain.match import Match, ensure_utc, utc_now
from app.domain.query import MatchListResponse, MatchQuery
from app.domain.team import Team
from app.models.match import MatchRecord, TeamRecord
from app.repositories.base import (
    DEFAULT_PAGE_LIMIT,
    DEFAULT_VIEW_LIMIT,
    MatchRepository,
)

logger = logging.getLogger(__name__)

# Kickoff ascending; row id keeps insertion order for equal kickoffs
KICKOFF_ORDER = (MatchRecord.kickoff_time, MatchRecord.id)


def _team_from_record(record: TeamRecord) -> Team:
    return Team(
        id=record.id,
        name=record.name,
        short_name=record.short_name,
        logo=record.logo,
        league=record.league,
        country=record.country,
    )


def _match_from_record(record: MatchRecord) -> Match:
    return Match(
        id=record.match_id,
        home_team=_team_from_record(record.home_team),
        away_team=_team_from_record(record.away_team),
        kickoff_time=record.kickoff_time,
        status=MatchStatus(record.status),
        venue=record.venue,
        league=League(record.league),
        season=record.season,
        prediction_status=PredictionStatus(record.prediction_status),
        prediction_deadline=record.prediction_deadline,
    )


class SqlMatchRepository(MatchRepository):
    """
    Match queries backed by a SQLAlchemy database.

    Same ordering and paging semantics as the in-memory store. Any database
    failure is raised as StoreUnavailableError so callers can tell it apart
    from an empty result.
    """

    def __init__(self, session_factory: sessionmaker, default_limit: int = DEFAULT_PAGE_LIMIT):
        self.session_factory = session_factory
        self.default_limit = default_limit

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Match store query failed: %s", e)
            raise StoreUnavailableError("Match store is unavailable") from e
        finally:
            session.close()

    def find_matches(self, query: MatchQuery) -> MatchListResponse:
        conditions = []
        if query.league is not None:
            conditions.append(MatchRecord.league == query.league.value)
        if query.status is not None:
            conditions.append(MatchRecord.prediction_status == query.status.value)

        offset = query.offset if query.offset is not None else 0
        limit = query.limit if query.limit is not None else self.default_limit

        with self._session() as session:
            total = session.scalar(
                select(func.count(MatchRecord.id)).where(*conditions)
            ) or 0
            if offset >= total:
                # Nothing to fetch; also keeps huge offsets away from the driver
                return MatchListResponse(matches=[], total=total, has_more=False)

            stmt = (
                select(MatchRecord)
                .where(*conditions)
                .order_by(*KICKOFF_ORDER)
                .offset(offset)
                .limit(limit)
            )
            matches = [_match_from_record(r) for r in session.scalars(stmt).all()]

        return MatchListResponse(
            matches=matches,
            total=total,
            has_more=offset + limit < total,
        )

    def find_by_id(self, match_id: str) -> Optional[Match]:
        with self._session() as session:
            record = session.scalars(
                select(MatchRecord).where(MatchRecord.match_id == match_id)
            ).first()
            return _match_from_record(record) if record else None

    def find_many(self, match_ids: Sequence[str]) -> List[Match]:
        if not match_ids:
            return []
        with self._session() as session:
            records = session.scalars(
                select(MatchRecord).where(MatchRecord.match_id.in_(list(match_ids)))
            ).all()
            found = {r.match_id: _match_from_record(r) for r in records}
        return [found[match_id] for match_id in match_ids if match_id in found]

    def find_upcoming_by_league(
        self,
        league: League,
        limit: int = DEFAULT_VIEW_LIMIT,
        now: Optional[datetime] = None,
    ) -> List[Match]:
        current = ensure_utc(now) if now is not None else utc_now()
        stmt = (
            select(MatchRecord)
            .where(MatchRecord.league == league.value)
            .where(MatchRecord.kickoff_time > current)
            .order_by(*KICKOFF_ORDER)
            .limit(limit)
        )
        with self._session() as session:
            return [_match_from_record(r) for r in session.scalars(stmt).all()]

    def find_accepting_predictions(self, limit: int = DEFAULT_VIEW_LIMIT) -> List[Match]:
        stmt = (
            select(MatchRecord)
            .where(MatchRecord.prediction_status == PredictionStatus.ACCEPTING.value)
            .order_by(*KICKOFF_ORDER)
            .limit(limit)
        )
        with self._session() as session:
            return [_match_from_record(r) for r in session.scalars(stmt).all()]

    def seed(self, matches: Sequence[Match]) -> int:
        """Insert matches (and their teams) when the table is empty. Returns rows added."""
        with self._session() as session:
            existing = session.scalar(select(func.count(MatchRecord.id)))
            if existing:
                logger.info("Match table already holds %d rows, skipping seed", existing)
                return 0

            teams = {}
            for match in matches:
                teams.setdefault(match.home_team.id, match.home_team)
                teams.setdefault(match.away_team.id, match.away_team)
            known = set(session.scalars(select(TeamRecord.id)).all())
            for team in teams.values():
                if team.id in known:
                    continue
                session.add(TeamRecord(
                    id=team.id,
                    name=team.name,
                    short_name=team.short_name,
                    logo=team.logo,
                    league=team.league,
                    country=team.country,
                ))
            session.flush()

            for match in matches:
                session.add(MatchRecord(
                    match_id=match.id,
                    home_team_id=match.home_team.id,
                    away_team_id=match.away_team.id,
                    kickoff_time=match.kickoff_time,
                    status=match.status.value,
                    venue=match.venue,
                    league=match.league.value,
                    season=match.season,
                    prediction_status=match.prediction_status.value,
                    prediction_deadline=match.prediction_deadline,
                ))
                # Flush per row so autoincrement ids follow the given order
                session.flush()
            session.commit()

        logger.info("Seeded %d matches", len(matches))
        return len(matches)
