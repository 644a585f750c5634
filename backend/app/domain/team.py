from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

SHORT_NAME_MAX_LENGTH = 5


class Team(BaseModel):
    """A club taking part in a match. Immutable once constructed."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    short_name: str
    logo: str
    league: str
    country: str

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        if not value:
            raise ValueError("Team ID is required")
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team name is required")
        return value

    @field_validator("short_name")
    @classmethod
    def _check_short_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team short name is required")
        if len(value) > SHORT_NAME_MAX_LENGTH:
            raise ValueError("Team short name must be 5 characters or less")
        return value

    @field_validator("league")
    @classmethod
    def _require_league(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team league is required")
        return value

    @field_validator("country")
    @classmethod
    def _require_country(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Team country is required")
        return value
