"""In-memory query engine: filtering, stable ordering, pagination, derived views."""

from datetime import timedelta

import pytest

from app.domain.enums import League, PredictionStatus
from app.domain.query import MatchQuery
from app.repositories.memory import InMemoryMatchRepository, MatchStore
from conftest import REFERENCE_TIME, build_match

KICKOFF_ORDER = [
    "m-done", "m-past", "m-live", "m-1", "m-2",
    "m-tie-a", "m-tie-b", "m-tie-c", "m-5", "m-6", "m-7",
]


@pytest.fixture
def repository(sample_matches) -> InMemoryMatchRepository:
    return InMemoryMatchRepository(MatchStore(sample_matches))


def ids(matches) -> list:
    return [m.id for m in matches]


def test_unfiltered_sorted_by_kickoff_with_stable_ties(repository) -> None:
    result = repository.find_matches(MatchQuery())
    assert ids(result.matches) == KICKOFF_ORDER
    assert result.total == 11
    assert result.has_more is False


def test_ties_keep_store_order_across_calls(repository) -> None:
    for _ in range(3):
        result = repository.find_matches(MatchQuery())
        tied = [m.id for m in result.matches if m.id.startswith("m-tie")]
        assert tied == ["m-tie-a", "m-tie-b", "m-tie-c"]


def test_default_limit_is_twenty() -> None:
    matches = [build_match(f"m-{i}", kickoff_in_hours=i + 1) for i in range(25)]
    result = InMemoryMatchRepository(MatchStore(matches)).find_matches(MatchQuery())
    assert len(result.matches) == 20
    assert result.total == 25
    assert result.has_more is True


def test_league_filter(repository, sample_matches) -> None:
    result = repository.find_matches(MatchQuery(league=League.PREMIER_LEAGUE, limit=100))
    assert all(m.league == League.PREMIER_LEAGUE for m in result.matches)
    expected = {m.id for m in sample_matches if m.league == League.PREMIER_LEAGUE}
    assert set(ids(result.matches)) == expected
    assert ids(result.matches) == ["m-done", "m-1", "m-tie-b", "m-5", "m-6"]


def test_status_filter(repository) -> None:
    result = repository.find_matches(MatchQuery(status=PredictionStatus.CLOSED))
    assert ids(result.matches) == ["m-past", "m-live"]
    assert result.total == 2


def test_combined_filters(repository) -> None:
    result = repository.find_matches(
        MatchQuery(league=League.LA_LIGA, status=PredictionStatus.ACCEPTING)
    )
    assert ids(result.matches) == ["m-tie-a", "m-7"]


def test_league_without_matches_returns_empty_page(repository) -> None:
    result = repository.find_matches(MatchQuery(league=League.LIGUE_1))
    assert result.matches == []
    assert result.total == 0
    assert result.has_more is False


@pytest.mark.parametrize("limit", [1, 2, 3, 4, 5, 11, 20])
def test_pages_reconstruct_the_full_listing(repository, limit: int) -> None:
    collected = []
    offset = 0
    while True:
        page = repository.find_matches(MatchQuery(limit=limit, offset=offset))
        collected.extend(ids(page.matches))
        if not page.has_more:
            break
        offset += limit
    assert collected == KICKOFF_ORDER


def test_page_metadata(repository) -> None:
    page = repository.find_matches(MatchQuery(limit=4, offset=4))
    assert ids(page.matches) == ["m-2", "m-tie-a", "m-tie-b", "m-tie-c"]
    assert page.total == 11
    assert page.has_more is True

    last = repository.find_matches(MatchQuery(limit=4, offset=8))
    assert ids(last.matches) == ["m-5", "m-6", "m-7"]
    assert last.has_more is False


def test_offset_at_total_returns_empty_page(repository) -> None:
    result = repository.find_matches(MatchQuery(offset=11))
    assert result.matches == []
    assert result.total == 11
    assert result.has_more is False


def test_find_by_id(repository) -> None:
    assert repository.find_by_id("m-2").id == "m-2"
    assert repository.find_by_id("missing") is None


def test_find_many_keeps_request_order(repository) -> None:
    assert ids(repository.find_many(["m-7", "missing", "m-1"])) == ["m-7", "m-1"]
    assert repository.find_many([]) == []


def test_upcoming_by_league_excludes_started_matches(repository) -> None:
    upcoming = repository.find_upcoming_by_league(League.PREMIER_LEAGUE, now=REFERENCE_TIME)
    assert ids(upcoming) == ["m-1", "m-tie-b", "m-5", "m-6"]

    limited = repository.find_upcoming_by_league(League.PREMIER_LEAGUE, limit=2, now=REFERENCE_TIME)
    assert ids(limited) == ["m-1", "m-tie-b"]


def test_upcoming_is_strictly_after_now(repository) -> None:
    at_kickoff = REFERENCE_TIME + timedelta(hours=12)
    upcoming = repository.find_upcoming_by_league(League.PREMIER_LEAGUE, now=at_kickoff)
    assert "m-1" not in ids(upcoming)


def test_accepting_predictions(repository) -> None:
    accepting = repository.find_accepting_predictions()
    assert ids(accepting) == ["m-1", "m-2", "m-tie-a", "m-tie-b", "m-tie-c", "m-5", "m-6", "m-7"]
    assert ids(repository.find_accepting_predictions(limit=3)) == ["m-1", "m-2", "m-tie-a"]


def test_supported_leagues(repository) -> None:
    assert repository.get_supported_leagues() == [
        League.PREMIER_LEAGUE,
        League.LA_LIGA,
        League.BUNDESLIGA,
        League.SERIE_A,
        League.LIGUE_1,
    ]


def test_queries_do_not_mutate_store(repository, sample_matches) -> None:
    repository.find_matches(MatchQuery(league=League.LA_LIGA, limit=1))
    repository.find_accepting_predictions(limit=1)
    assert ids(repository.store.matches) == ids(sample_matches)
