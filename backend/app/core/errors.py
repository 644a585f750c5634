class MatchQueryError(Exception):
    """Base class for failures surfaced by the match query layer."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryValidationError(MatchQueryError):
    """Malformed list query (limit or offset out of range)."""

    code = "VALIDATION_ERROR"
    status_code = 400


class StoreUnavailableError(MatchQueryError):
    """The backing match store could not be read."""

    code = "STORE_UNAVAILABLE"
    status_code = 503
