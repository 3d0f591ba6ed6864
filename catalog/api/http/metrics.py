"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get(
    "/metrics",
    response_class=Response,
    summary="Prometheus metrics endpoint",
    tags=["metrics"],
)
async def metrics() -> Response:
    """
    Expose Prometheus metrics in the text exposition format.

    Example:
        ```
        # HELP catalog_mutations_total Total records created, updated or deleted
        # TYPE catalog_mutations_total counter
        catalog_mutations_total{entity="genre",operation="create"} 3.0
        ```
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
