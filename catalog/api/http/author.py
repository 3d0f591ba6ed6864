"""Author pages: list, detail and the create/update/delete forms."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from catalog import views
from catalog.dependencies import SessionFactoryDep
from catalog.models import EntityKind
from catalog.utils.error_handler import handle_http_errors

router = APIRouter(tags=["authors"])

KIND = EntityKind.AUTHOR


@router.get("/authors", response_class=HTMLResponse)
@handle_http_errors
async def author_list(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_list(request, session_factory, KIND)


@router.get("/author/create", response_class=HTMLResponse)
@handle_http_errors
async def author_create_get(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_create_form(request, session_factory, KIND)


@router.post("/author/create", response_class=HTMLResponse)
@handle_http_errors
async def author_create_post(
    request: Request, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND)


@router.get("/author/{author_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def author_delete_get(
    request: Request, author_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.show_delete(request, session_factory, KIND, author_id)


@router.post("/author/{author_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def author_delete_post(
    request: Request, author_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_delete(request, session_factory, KIND, author_id)


@router.get("/author/{author_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def author_update_get(
    request: Request, author_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_update_form(request, session_factory, KIND, author_id)


@router.post("/author/{author_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def author_update_post(
    request: Request, author_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND, author_id)


@router.get("/author/{author_id}", response_class=HTMLResponse)
@handle_http_errors
async def author_detail(
    request: Request, author_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_detail(request, session_factory, KIND, author_id)
