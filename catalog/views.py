"""
Page flows shared by the entity routes.

Each function implements one request of the create/update/delete cycle
for any entity kind; the route modules only bind them to paths.
"""

from typing import Any, Mapping
from uuid import UUID

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.deletion_commands import (
    DeleteRecordCommand,
    DeletionContext,
    GetDeletionContextCommand,
)
from catalog.commands.query_commands import (
    DETAIL_COMMANDS,
    GetBookGenreIdsCommand,
    GetRecordCommand,
    ListRecordsCommand,
)
from catalog.exceptions import DependencyExistsError, FieldError
from catalog.forms import FORMS, form_to_dict
from catalog.forms.base import multi_value_names
from catalog.models import EntityKind
from catalog.pipeline import MutationPipeline
from catalog.references import ReferenceOption, ResolveFormOptionsCommand
from catalog.rendering import render
from catalog.utils.concurrency import join
from catalog.utils.identifiers import parse_identifier

SessionFactory = async_sessionmaker[AsyncSession]

TITLES = {
    EntityKind.AUTHOR: "Author",
    EntityKind.BOOK: "Book",
    EntityKind.GENRE: "Genre",
    EntityKind.BOOK_INSTANCE: "BookInstance",
}

LIST_TITLES = {
    EntityKind.AUTHOR: "Author List",
    EntityKind.BOOK: "Book List",
    EntityKind.GENRE: "Genre List",
    EntityKind.BOOK_INSTANCE: "Book Instance List",
}


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _render_form(
    request: Request,
    kind: EntityKind,
    title: str,
    values: Mapping[str, Any],
    options: dict[str, list[ReferenceOption]],
    errors: list[FieldError] | None = None,
) -> HTMLResponse:
    return render(
        request,
        f"{kind.value}_form.html",
        {
            "title": title,
            "values": values,
            "errors": errors or [],
            **options,
        },
    )


async def show_list(
    request: Request, session_factory: SessionFactory, kind: EntityKind
) -> HTMLResponse:
    items = await ListRecordsCommand(session_factory, kind).execute()
    return render(
        request,
        f"{kind.value}_list.html",
        {"title": LIST_TITLES[kind], "items": items},
    )


async def show_detail(
    request: Request,
    session_factory: SessionFactory,
    kind: EntityKind,
    raw_id: str,
) -> HTMLResponse:
    entity_id = parse_identifier(raw_id)
    detail = await DETAIL_COMMANDS[kind](session_factory).execute(entity_id)
    return render(
        request,
        f"{kind.value}_detail.html",
        {"title": TITLES[kind], "detail": detail},
    )


async def show_create_form(
    request: Request, session_factory: SessionFactory, kind: EntityKind
) -> HTMLResponse:
    values: dict[str, Any] = {}
    options = await ResolveFormOptionsCommand(session_factory, kind).execute(
        values
    )
    return _render_form(
        request, kind, f"Create {TITLES[kind]}", values, options
    )


async def show_update_form(
    request: Request,
    session_factory: SessionFactory,
    kind: EntityKind,
    raw_id: str,
) -> HTMLResponse:
    """Form pre-filled from the stored record; 404 when it is missing."""
    entity_id = parse_identifier(raw_id)
    record = GetRecordCommand(session_factory, kind).execute(entity_id)

    if kind == EntityKind.BOOK:
        entity, genre_ids = await join(
            record,
            GetBookGenreIdsCommand(session_factory).execute(entity_id),
        )
        values = FORMS[kind]().initial(entity, genre_ids)
    else:
        values = FORMS[kind]().initial(await record)

    options = await ResolveFormOptionsCommand(session_factory, kind).execute(
        values
    )
    return _render_form(
        request, kind, f"Update {TITLES[kind]}", values, options
    )


async def submit_form(
    request: Request,
    session_factory: SessionFactory,
    kind: EntityKind,
    raw_id: str | None = None,
) -> Response:
    """
    Run a create (``raw_id`` None) or update submission.

    Redirects to the record on success; renders the form again with the
    submitted values and every field error otherwise.
    """
    entity_id = parse_identifier(raw_id) if raw_id is not None else None
    raw = form_to_dict(
        await request.form(), multi=multi_value_names(FORMS[kind]())
    )

    context = await MutationPipeline(session_factory, kind).run(
        raw, entity_id=entity_id
    )
    if context.accepted:
        return redirect(context.locator)

    verb = "Update" if context.is_update else "Create"
    return _render_form(
        request,
        kind,
        f"{verb} {TITLES[kind]}",
        context.values,
        context.options,
        context.errors,
    )


def _render_delete(
    request: Request, kind: EntityKind, context: DeletionContext
) -> HTMLResponse:
    return render(
        request,
        f"{kind.value}_delete.html",
        {
            "title": f"Delete {TITLES[kind]}",
            "entity": context.entity,
            "dependents": context.dependents,
        },
    )


async def show_delete(
    request: Request,
    session_factory: SessionFactory,
    kind: EntityKind,
    raw_id: str,
) -> Response:
    """Confirmation page; a missing record redirects to the list view."""
    entity_id = parse_identifier(raw_id)
    context = await GetDeletionContextCommand(session_factory, kind).execute(
        entity_id
    )
    if context.entity is None:
        return redirect(kind.list_path)
    return _render_delete(request, kind, context)


async def submit_delete(
    request: Request,
    session_factory: SessionFactory,
    kind: EntityKind,
    raw_id: str,
) -> Response:
    """Delete and redirect to the list view, or show what blocks it."""
    entity_id = parse_identifier(raw_id)
    try:
        outcome = await DeleteRecordCommand(session_factory, kind).execute(
            entity_id
        )
    except DependencyExistsError as ex:
        return _render_delete(
            request,
            kind,
            DeletionContext(entity=ex.entity, dependents=ex.dependents),
        )
    return redirect(outcome.redirect)
