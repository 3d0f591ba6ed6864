"""
Security headers middleware.

Adds security-related HTTP headers to all responses to protect against
common web vulnerabilities.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from catalog.settings import app_settings

# Pages are server-rendered; only same-origin resources are needed
CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; frame-ancestors 'none'; form-action 'self'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds security headers to all HTTP responses.

    Headers added:
    - X-Frame-Options: Prevents clickjacking attacks
    - X-Content-Type-Options: Prevents MIME type sniffing
    - Referrer-Policy: Controls referrer information
    - Permissions-Policy: Controls browser features
    - Content-Security-Policy: Restricts resources to the same origin
    - Strict-Transport-Security: Only in production, where TLS terminates
      in front of the application
    """

    def __init__(self, app: ASGIApp, hsts: bool | None = None):
        """
        Initialize the security headers middleware.

        Args:
            app: The ASGI application.
            hsts: Send Strict-Transport-Security. Defaults to
                app_settings.IS_PRODUCTION.
        """
        super().__init__(app)
        self.hsts = app_settings.IS_PRODUCTION if hsts is None else hsts

    async def dispatch(self, request: Request, call_next: ASGIApp) -> Response:
        response = await call_next(request)

        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Permissions-Policy"] = (
            "geolocation=(), microphone=(), camera=()"
        )
        response.headers.setdefault(
            "Content-Security-Policy", CONTENT_SECURITY_POLICY
        )

        if self.hsts:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response
