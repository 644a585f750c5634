from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.enums import League, PredictionStatus
from app.domain.match import Match


class MatchQuery(BaseModel):
    """
    Filters and paging for a match listing.

    None means "no constraint" for league/status and "use the default"
    for limit/offset. Range checks happen in the service layer.
    """

    model_config = ConfigDict(frozen=True)

    league: Optional[League] = None
    status: Optional[PredictionStatus] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class MatchListResponse(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    matches: List[Match]
    total: int
    has_more: bool
