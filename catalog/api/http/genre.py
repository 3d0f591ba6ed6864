"""
Genre pages.

Creating a genre whose name already exists redirects to the existing genre.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from catalog import views
from catalog.dependencies import SessionFactoryDep
from catalog.models import EntityKind
from catalog.utils.error_handler import handle_http_errors

router = APIRouter(tags=["genres"])

KIND = EntityKind.GENRE


@router.get("/genres", response_class=HTMLResponse)
@handle_http_errors
async def genre_list(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_list(request, session_factory, KIND)


@router.get("/genre/create", response_class=HTMLResponse)
@handle_http_errors
async def genre_create_get(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_create_form(request, session_factory, KIND)


@router.post("/genre/create", response_class=HTMLResponse)
@handle_http_errors
async def genre_create_post(
    request: Request, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND)


@router.get("/genre/{genre_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def genre_delete_get(
    request: Request, genre_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.show_delete(request, session_factory, KIND, genre_id)


@router.post("/genre/{genre_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def genre_delete_post(
    request: Request, genre_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_delete(request, session_factory, KIND, genre_id)


@router.get("/genre/{genre_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def genre_update_get(
    request: Request, genre_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_update_form(request, session_factory, KIND, genre_id)


@router.post("/genre/{genre_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def genre_update_post(
    request: Request, genre_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND, genre_id)


@router.get("/genre/{genre_id}", response_class=HTMLResponse)
@handle_http_errors
async def genre_detail(
    request: Request, genre_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_detail(request, session_factory, KIND, genre_id)
