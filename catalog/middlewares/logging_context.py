"""
Middleware for injecting contextual fields into structured logs.

Request fields are added to the log context for the duration of the
request and an access line is logged for every path not excluded in
settings.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from catalog.logging import clear_log_context, logger, set_log_context
from catalog.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint, method and client address to log context
    - Adds status code and duration once the response is ready
    - Logs one access line per request outside ``LOG_EXCLUDED_PATHS``
    - Clears log context after request completes
    """

    async def dispatch(self, request: Request, call_next: ASGIApp) -> Response:
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
            client=request.client.host if request.client else None,
        )
        start_time = time.perf_counter()

        try:
            response = await call_next(request)

            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            set_log_context(
                status_code=response.status_code, duration_ms=duration_ms
            )
            if request.url.path not in app_settings.LOG_EXCLUDED_PATHS:
                logger.info(
                    f"{request.method} {request.url.path} "
                    f"{response.status_code} {duration_ms}ms"
                )
            return response
        finally:
            clear_log_context()
