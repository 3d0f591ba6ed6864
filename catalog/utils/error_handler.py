"""
Error handling for HTML routes.

``handle_http_errors`` converts application and storage exceptions raised
by a route into ``HTTPException``; ``register_exception_handlers`` renders
every ``HTTPException`` (including unmatched routes) as the error page.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.exceptions import AppException
from catalog.logging import logger
from catalog.rendering import render
from catalog.settings import app_settings
from catalog.utils.metrics import app_errors_total


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    The original exception is chained as ``__cause__`` so the error page
    can show it outside production.

    Example:
        ```python
        @router.get("/author/{author_id}")
        @handle_http_errors
        async def author_detail(request: Request, author_id: str, ...):
            ...  # NotFoundError becomes a 404 page
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            app_errors_total.labels(
                error_type=type(ex).__name__, handler=func.__name__
            ).inc()
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            ) from ex
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            app_errors_total.labels(
                error_type="database", handler=func.__name__
            ).inc()
            raise HTTPException(
                status_code=500,
                detail="Database error occurred",
            ) from ex

    return wrapper


def error_page(
    request: Request, status_code: int, message: str, error: Any = None
) -> HTMLResponse:
    """Render the error page; ``error`` is only shown outside production."""
    return render(
        request,
        "error.html",
        {
            "title": "Error",
            "message": message,
            "status_code": status_code,
            "error": None if app_settings.IS_PRODUCTION else error,
        },
        status_code=status_code,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> HTMLResponse:
    cause = exc.__cause__
    return error_page(
        request,
        exc.status_code,
        str(exc.detail),
        f"{type(cause).__name__}: {cause}" if cause else None,
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> HTMLResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_page(
        request, 500, "Internal Server Error", f"{type(exc).__name__}: {exc}"
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
