"""
Prometheus metrics middleware for HTTP requests.

Requests are labelled with the route template (``/book/{book_id}``) rather
than the concrete path so every record does not get a series of its own.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match
from starlette.types import ASGIApp

from catalog.utils.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)

UNMATCHED_ENDPOINT = "<unmatched>"


def endpoint_label(request: Request) -> str:
    """Route template matching ``request``, or a fixed label for none."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ENDPOINT)
    return UNMATCHED_ENDPOINT


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware to track Prometheus metrics for HTTP requests.

    Tracks the following metrics:
    - http_requests_total: Counter of total requests by method, endpoint, and status
    - http_request_duration_seconds: Histogram of request durations
    - http_requests_in_progress: Gauge of in-progress requests
    """

    async def dispatch(self, request: Request, call_next: ASGIApp) -> Response:
        method = request.method
        endpoint = endpoint_label(request)

        http_requests_in_progress.labels(method=method, endpoint=endpoint).inc()
        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            http_request_duration_seconds.labels(
                method=method, endpoint=endpoint
            ).observe(time.time() - start_time)
            http_requests_total.labels(
                method=method, endpoint=endpoint, status_code=status_code
            ).inc()
            http_requests_in_progress.labels(
                method=method, endpoint=endpoint
            ).dec()
