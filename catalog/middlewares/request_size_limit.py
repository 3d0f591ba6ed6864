"""
Request body size limit middleware.

Protects against large payload attacks by enforcing a maximum request body
size on form submissions.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from catalog.logging import logger
from catalog.settings import app_settings


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware that enforces maximum request body size.

    Rejects requests whose Content-Length header exceeds the configured
    maximum with 413, and malformed Content-Length headers with 400.
    """

    def __init__(self, app: ASGIApp, max_size: int | None = None):
        """
        Initialize the request size limit middleware.

        Args:
            app: The ASGI application.
            max_size: Maximum request body size in bytes.
                If None, uses app_settings.MAX_REQUEST_BODY_SIZE.
        """
        super().__init__(app)
        self.max_size = max_size or app_settings.MAX_REQUEST_BODY_SIZE

    async def dispatch(self, request: Request, call_next: ASGIApp) -> Response:
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                logger.warning(f"Invalid Content-Length header: {content_length}")
                return Response(
                    content="Invalid Content-Length header",
                    status_code=400,
                    media_type="text/plain",
                )

            if size > self.max_size:
                logger.warning(
                    f"Request rejected: body size {size} bytes "
                    f"exceeds limit of {self.max_size} bytes"
                )
                return Response(
                    content=(
                        f"Request body too large. "
                        f"Maximum allowed: {self.max_size} bytes"
                    ),
                    status_code=413,
                    media_type="text/plain",
                )

        return await call_next(request)
