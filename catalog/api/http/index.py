"""Dashboard with the catalog record counts."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.commands.dashboard_commands import GetCatalogCountsCommand
from catalog.dependencies import SessionFactoryDep
from catalog.rendering import render
from catalog.utils.error_handler import handle_http_errors

router = APIRouter(tags=["catalog"])


@router.get("/", response_class=HTMLResponse)
@handle_http_errors
async def index(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    """
    Home page.

    The five counts are loaded concurrently; if any of them fails the page
    fails with the storage error.
    """
    counts = await GetCatalogCountsCommand(session_factory).execute()
    return render(
        request,
        "index.html",
        {"title": "Local Library Home", "counts": counts.as_rows()},
    )
