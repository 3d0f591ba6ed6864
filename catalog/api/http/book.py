"""Book pages: list, detail and the create/update/delete forms."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from catalog import views
from catalog.dependencies import SessionFactoryDep
from catalog.models import EntityKind
from catalog.utils.error_handler import handle_http_errors

router = APIRouter(tags=["books"])

KIND = EntityKind.BOOK


@router.get("/books", response_class=HTMLResponse)
@handle_http_errors
async def book_list(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_list(request, session_factory, KIND)


@router.get("/book/create", response_class=HTMLResponse)
@handle_http_errors
async def book_create_get(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_create_form(request, session_factory, KIND)


@router.post("/book/create", response_class=HTMLResponse)
@handle_http_errors
async def book_create_post(
    request: Request, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND)


@router.get("/book/{book_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def book_delete_get(
    request: Request, book_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.show_delete(request, session_factory, KIND, book_id)


@router.post("/book/{book_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def book_delete_post(
    request: Request, book_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_delete(request, session_factory, KIND, book_id)


@router.get("/book/{book_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def book_update_get(
    request: Request, book_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_update_form(request, session_factory, KIND, book_id)


@router.post("/book/{book_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def book_update_post(
    request: Request, book_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND, book_id)


@router.get("/book/{book_id}", response_class=HTMLResponse)
@handle_http_errors
async def book_detail(
    request: Request, book_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_detail(request, session_factory, KIND, book_id)
