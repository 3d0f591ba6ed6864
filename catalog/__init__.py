# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.pipeline import MiddlewarePipeline
from catalog.routing import collect_subrouters
from catalog.settings import app_settings
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers

__version__ = "1.0.0"


async def startup() -> None:
    """
    Application startup handler.

    Waits for the database, creates missing tables and publishes the
    application info metric.
    """
    await wait_and_init_db()

    from catalog.utils.metrics import app_info

    app_info.labels(
        version=__version__,
        python_version=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        environment=app_settings.ENVIRONMENT,
    ).set(1)
    logger.info("Application startup complete")


async def shutdown() -> None:
    """Application shutdown handler; releases pooled connections."""
    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup()
    yield
    await shutdown()


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    - Routers are collected from ``catalog/api/http``.
    - ``HTTPException`` and unexpected errors render the HTML error page.
    - Middleware is registered through ``MiddlewarePipeline`` in logical
      order: TrustedHost → CorrelationID → LoggingContext →
      RequestSizeLimit → SecurityHeaders → GZip → Prometheus.
    """
    app = FastAPI(
        title=app_settings.APP_TITLE,
        description="Local library catalog",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)

    pipeline = MiddlewarePipeline()
    pipeline.validate_dependencies()
    pipeline.apply_to_app(app)

    return app


app = application()  # Need for fastapi cli
