"""Health check endpoint for monitoring service status."""

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.dependencies import SessionFactoryDep
from catalog.logging import logger

router = APIRouter()


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    database: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    tags=["health"],
)
async def health_check(
    response: Response, session_factory: SessionFactoryDep
) -> HealthResponse:
    """
    Check database connectivity.

    Returns:
        HealthResponse: Health status of the service and its database.
        Returns 503 Service Unavailable if the database is unreachable.
    """
    db_status = "healthy"

    try:
        async with session_factory() as session:
            conn = await session.connection()
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "unhealthy"

    if db_status == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(status=db_status, database=db_status)
