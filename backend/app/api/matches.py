import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.api.responses import error_response, failure_response, success_response
from app.domain.enums import League, PredictionStatus
from app.domain.query import MatchQuery
from app.repositories.base import DEFAULT_VIEW_LIMIT
from app.services.matches import MatchService

router = APIRouter()


def get_match_service(request: Request) -> MatchService:
    """The service built once by the application factory."""
    return request.app.state.match_service


def parse_league(value: Optional[str]) -> Optional[League]:
    # Unknown values (including the UI's "ALL") mean no league filter
    if not value:
        return None
    try:
        return League(value)
    except ValueError:
        return None


def parse_prediction_status(value: Optional[str]) -> Optional[PredictionStatus]:
    if not value:
        return None
    try:
        return PredictionStatus(value)
    except ValueError:
        return None


LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    # Leading integer only: "5abc" -> 5, "2.9" -> 2, "abc" -> None
    if not value:
        return None
    match = LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@router.get("")
async def list_matches(
    league: Optional[str] = None,
    status: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    service: MatchService = Depends(get_match_service),
):
    """Filtered, kickoff-ordered page of matches"""
    query = MatchQuery(
        league=parse_league(league),
        status=parse_prediction_status(status),
        limit=parse_int(limit),
        offset=parse_int(offset),
    )
    try:
        result = service.execute(query)
    except Exception as e:
        return error_response(e, "GET /api/matches")
    return success_response(_dump(result))


@router.get("/upcoming")
async def list_upcoming_matches(
    league: Optional[str] = None,
    limit: Optional[str] = None,
    service: MatchService = Depends(get_match_service),
):
    """Upcoming matches of a league (or the first page of all matches)"""
    parsed_limit = parse_int(limit)
    try:
        result = service.get_upcoming_matches(
            parse_league(league),
            parsed_limit if parsed_limit is not None else DEFAULT_VIEW_LIMIT,
        )
    except Exception as e:
        return error_response(e, "GET /api/matches/upcoming")
    return success_response(_dump(result))


@router.get("/accepting")
async def list_accepting_matches(
    limit: Optional[str] = None,
    service: MatchService = Depends(get_match_service),
):
    """Matches still accepting predictions"""
    parsed_limit = parse_int(limit)
    try:
        result = service.get_accepting_predictions(
            parsed_limit if parsed_limit is not None else DEFAULT_VIEW_LIMIT
        )
    except Exception as e:
        return error_response(e, "GET /api/matches/accepting")
    return success_response(_dump(result))


@router.get("/leagues")
async def list_leagues(service: MatchService = Depends(get_match_service)):
    """Leagues the service recognises"""
    try:
        leagues = service.get_supported_leagues()
    except Exception as e:
        return error_response(e, "GET /api/matches/leagues")
    return success_response({"leagues": [league.value for league in leagues]})


@router.get("/batch")
async def get_matches_batch(
    ids: List[str] = Query(default=[]),
    service: MatchService = Depends(get_match_service),
):
    """Several matches by id, in request order; unknown ids are skipped"""
    try:
        matches = service.get_matches(ids)
    except Exception as e:
        return error_response(e, "GET /api/matches/batch")
    return success_response({"matches": [_dump(m) for m in matches]})


@router.get("/{match_id}")
async def get_match(
    match_id: str,
    service: MatchService = Depends(get_match_service),
):
    """Match details"""
    try:
        match = service.get_match(match_id)
    except Exception as e:
        return error_response(e, f"GET /api/matches/{match_id}")
    if match is None:
        return failure_response("MATCH_NOT_FOUND", f"Match {match_id} not found", 404)
    return success_response({"match": _dump(match)})
