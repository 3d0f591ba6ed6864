"""
Option sets for forms that reference other records.

Book forms offer every author and genre, copy forms every book. Options
are flagged as selected by comparing canonical identifier strings, since
the submitted values and the stored identifiers arrive in different
forms.
"""

from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from catalog.commands.base import StoreCommand
from catalog.models import EntityKind
from catalog.repositories import (
    AuthorRepository,
    BookRepository,
    GenreRepository,
)
from catalog.utils.concurrency import join
from catalog.utils.identifiers import same_identifier


class ReferenceOption(BaseModel):
    """One choice of a select or checkbox group."""

    id: str
    label: str
    selected: bool = False


def mark_selected(
    records: Iterable[Any], selected: Iterable[Any], label: str = "name"
) -> list[ReferenceOption]:
    """
    Build options for ``records``, flagging those in ``selected``.

    Args:
        records: Records with an ``id`` and a ``label`` attribute.
        selected: Identifiers (strings or UUIDs) currently chosen.
        label: Attribute used as the option text.

    Returns:
        Options in the order of ``records``.
    """
    chosen = list(selected)
    return [
        ReferenceOption(
            id=str(record.id),
            label=getattr(record, label),
            selected=any(same_identifier(record.id, value) for value in chosen),
        )
        for record in records
    ]


def _as_list(value: Any) -> list[Any]:
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class ResolveFormOptionsCommand(
    StoreCommand[Mapping[str, Any], dict[str, list[ReferenceOption]]]
):
    """
    Load the option sets of the ``kind`` form.

    Input is the form values; their references decide which options are
    selected. Kinds without references get no options.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(
        self, values: Mapping[str, Any]
    ) -> dict[str, list[ReferenceOption]]:
        if self.kind == EntityKind.BOOK:
            authors, genres = await join(
                self.read(AuthorRepository, lambda repo: repo.get_all()),
                self.read(GenreRepository, lambda repo: repo.get_all()),
            )
            return {
                "authors": mark_selected(
                    authors, _as_list(values.get("author"))
                ),
                "genres": mark_selected(genres, _as_list(values.get("genre"))),
            }

        if self.kind == EntityKind.BOOK_INSTANCE:
            books = await self.read(BookRepository, lambda repo: repo.get_all())
            return {
                "books": mark_selected(
                    books, _as_list(values.get("book")), label="title"
                )
            }

        return {}
