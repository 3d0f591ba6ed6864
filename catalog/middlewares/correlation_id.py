"""
Middleware for request correlation ID tracking.

Every request gets a short identifier, taken from the ``X-Correlation-ID``
header when the client sends one, that is attached to each log line
written while the request is handled.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORRELATION_HEADER = "X-Correlation-ID"
CORRELATION_ID_LENGTH = 8

# Context variable for storing correlation ID per request
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _new_correlation_id() -> str:
    return uuid.uuid4().hex[:CORRELATION_ID_LENGTH]


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware adding correlation IDs to requests.

    This middleware:
    - Reuses the client's X-Correlation-ID, stripped of characters other
      than letters, digits, ``-`` and ``_``, or generates a new one
    - Limits correlation IDs to 8 characters
    - Stores the ID in ``request.state.request_id`` and in a context
      variable read by the log formatters
    - Echoes the ID in the response headers
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        cid = _UNSAFE_CHARS.sub("", request.headers.get(CORRELATION_HEADER, ""))
        cid = cid[:CORRELATION_ID_LENGTH] or _new_correlation_id()

        request.state.request_id = cid
        token = correlation_id.set(cid)
        try:
            response = await call_next(request)
        finally:
            correlation_id.reset(token)

        response.headers[CORRELATION_HEADER] = cid
        return response


def get_correlation_id() -> str:
    """
    Get the correlation ID for the current request context.

    Returns:
        The correlation ID string, or empty string outside a request.
    """
    return correlation_id.get()
