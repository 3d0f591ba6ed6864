"""
Explicit middleware pipeline with dependency validation and visualization.

The middleware list is kept in LOGICAL execution order (request flow);
the reversal required by Starlette's registration order happens in
``apply_to_app``.
"""

from typing import Any

from fastapi import FastAPI
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware
from catalog.middlewares.prometheus import PrometheusMiddleware
from catalog.middlewares.request_size_limit import RequestSizeLimitMiddleware
from catalog.middlewares.security_headers import SecurityHeadersMiddleware
from catalog.settings import app_settings


class MiddlewarePipeline:
    """
    Manages middleware registration with explicit ordering and dependency validation.

    Example:
        ```python
        pipeline = MiddlewarePipeline(allowed_hosts=["library.example.com"])
        pipeline.validate_dependencies()
        pipeline.apply_to_app(app)
        ```
    """

    def __init__(
        self,
        allowed_hosts: list[str] | None = None,
        max_body_size: int | None = None,
        gzip_minimum_size: int | None = None,
    ):
        """
        Initialize middleware pipeline with configuration.

        Args:
            allowed_hosts: Allowed host headers for TrustedHostMiddleware.
            max_body_size: Limit for RequestSizeLimitMiddleware.
            gzip_minimum_size: Smallest response body GZipMiddleware compresses.
        """
        if gzip_minimum_size is None:
            gzip_minimum_size = app_settings.GZIP_MINIMUM_SIZE

        # Each middleware is a tuple: (MiddlewareClass, kwargs_dict)
        self.middleware: list[tuple[type, dict[str, Any]]] = [
            # 1. TrustedHost - Validates host headers first
            (
                TrustedHostMiddleware,
                {"allowed_hosts": allowed_hosts or app_settings.ALLOWED_HOSTS},
            ),
            # 2. CorrelationID - Generated early so every log line carries it
            (CorrelationIDMiddleware, {}),
            # 3. LoggingContext - Needs the correlation ID
            (LoggingContextMiddleware, {}),
            # 4. RequestSizeLimit - Reject oversized form posts
            (RequestSizeLimitMiddleware, {"max_size": max_body_size}),
            # 5. SecurityHeaders - Add security headers to response
            (SecurityHeadersMiddleware, {}),
            # 6. GZip - Compress rendered pages
            (GZipMiddleware, {"minimum_size": gzip_minimum_size}),
            # 7. Prometheus - Innermost, measures the handlers
            (PrometheusMiddleware, {}),
        ]

        # {MiddlewareClass: [middleware that must execute before it]}
        self.dependencies: dict[type, list[type]] = {
            LoggingContextMiddleware: [CorrelationIDMiddleware],
        }

    def apply_to_app(self, app: FastAPI) -> None:
        """
        Register middleware to FastAPI app in correct order.

        Args:
            app: FastAPI application instance to register middleware on.
        """
        for middleware_class, kwargs in reversed(self.middleware):
            app.add_middleware(middleware_class, **kwargs)

        logger.info(f"Middleware pipeline applied: {self.visualize()}")

    def visualize(self) -> str:
        """
        Return string representation of middleware execution order.

        Example:
            "TrustedHostMiddleware → CorrelationIDMiddleware → ... → PrometheusMiddleware"
        """
        return " → ".join(mw[0].__name__ for mw in self.middleware)

    def validate_dependencies(self) -> None:
        """
        Validate that middleware dependencies are satisfied.

        Raises:
            ValueError: If a middleware dependency is missing or ordered
                after the middleware that needs it.
        """
        positions = {
            mw_class: idx for idx, (mw_class, _) in enumerate(self.middleware)
        }

        for middleware_class, required in self.dependencies.items():
            if middleware_class not in positions:
                raise ValueError(
                    f"Middleware {middleware_class.__name__} has dependencies "
                    f"but is not in the pipeline"
                )

            for required_class in required:
                if required_class not in positions:
                    raise ValueError(
                        f"Dependency {required_class.__name__} required by "
                        f"{middleware_class.__name__} is not in the pipeline"
                    )
                if positions[required_class] >= positions[middleware_class]:
                    raise ValueError(
                        f"Middleware dependency violation: "
                        f"{middleware_class.__name__} requires "
                        f"{required_class.__name__} to execute before it"
                    )

        logger.info("Middleware dependencies validated successfully")

    def get_middleware_list(self) -> list[tuple[type, dict[str, Any]]]:
        """Middleware in logical execution order."""
        return self.middleware.copy()
