"""
Response envelope shared by every match endpoint:

    {"success": bool, "data": {...}?, "error": {"code", "message"}?,
     "meta": {"timestamp": ISO-8601}}
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from app.core.errors import MatchQueryError

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def envelope(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if error is not None:
        body["error"] = error
    body["meta"] = {"timestamp": timestamp()}
    return body


def success_response(data: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=envelope(True, data=data))


def failure_response(code: str, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(False, error={"code": code, "message": message}),
    )


def error_response(exc: Exception, context: str) -> JSONResponse:
    """
    Map an exception raised while serving `context` to an error envelope.
    Must be called from inside the except block so tracebacks are logged.
    """
    if isinstance(exc, MatchQueryError):
        if exc.status_code >= 500:
            logger.error("%s failed: %s", context, exc.message)
        else:
            logger.info("%s rejected: %s", context, exc.message)
        return failure_response(exc.code, exc.message, exc.status_code)

    logger.exception("Error in %s", context)
    return failure_response(
        INTERNAL_SERVER_ERROR,
        str(exc) or "An unexpected error occurred",
        500,
    )
