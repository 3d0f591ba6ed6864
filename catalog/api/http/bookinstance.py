"""Copies of books: list, detail and the create/update/delete forms."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from catalog import views
from catalog.dependencies import SessionFactoryDep
from catalog.models import EntityKind
from catalog.utils.error_handler import handle_http_errors

router = APIRouter(tags=["bookinstances"])

KIND = EntityKind.BOOK_INSTANCE


@router.get("/bookinstances", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_list(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_list(request, session_factory, KIND)


@router.get("/bookinstance/create", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_create_get(
    request: Request, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_create_form(request, session_factory, KIND)


@router.post("/bookinstance/create", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_create_post(
    request: Request, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND)


@router.get("/bookinstance/{bookinstance_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_delete_get(
    request: Request, bookinstance_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.show_delete(request, session_factory, KIND, bookinstance_id)


@router.post("/bookinstance/{bookinstance_id}/delete", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_delete_post(
    request: Request, bookinstance_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_delete(request, session_factory, KIND, bookinstance_id)


@router.get("/bookinstance/{bookinstance_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_update_get(
    request: Request, bookinstance_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_update_form(request, session_factory, KIND, bookinstance_id)


@router.post("/bookinstance/{bookinstance_id}/update", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_update_post(
    request: Request, bookinstance_id: str, session_factory: SessionFactoryDep
) -> Response:
    return await views.submit_form(request, session_factory, KIND, bookinstance_id)


@router.get("/bookinstance/{bookinstance_id}", response_class=HTMLResponse)
@handle_http_errors
async def bookinstance_detail(
    request: Request, bookinstance_id: str, session_factory: SessionFactoryDep
) -> HTMLResponse:
    return await views.show_detail(request, session_factory, KIND, bookinstance_id)
