"""
Building candidate entities from normalized form values.

Drafts are not persisted; the mutation commands turn them into stored
records. An update draft always carries the identifier of the record it
replaces.
"""

from typing import Any, Mapping
from uuid import UUID

from catalog.models import (
    AuthorDraft,
    BookDraft,
    BookInstanceDraft,
    EntityKind,
    GenreDraft,
)

Draft = AuthorDraft | BookDraft | BookInstanceDraft | GenreDraft

DRAFTS: dict[EntityKind, type[Draft]] = {
    EntityKind.AUTHOR: AuthorDraft,
    EntityKind.BOOK: BookDraft,
    EntityKind.GENRE: GenreDraft,
    EntityKind.BOOK_INSTANCE: BookInstanceDraft,
}


def build_draft(
    kind: EntityKind,
    cleaned: Mapping[str, Any],
    entity_id: UUID | None = None,
) -> Draft:
    """
    Build the draft of ``kind`` from cleaned form values.

    Args:
        kind: Entity kind of the draft.
        cleaned: Values produced by a successful form validation.
        entity_id: Identifier of the record being replaced, if any.

    Returns:
        The draft, carrying ``entity_id``.
    """
    return DRAFTS[kind](id=entity_id, **cleaned)


def build_update_draft(
    kind: EntityKind, cleaned: Mapping[str, Any], entity_id: UUID | None
) -> Draft:
    """
    Build a draft replacing the record ``entity_id``.

    Raises:
        ValueError: If ``entity_id`` is missing; a draft without it would
            be stored as a new record.
    """
    if entity_id is None:
        raise ValueError(f"Update of {kind.value} requires an identifier")
    return build_draft(kind, cleaned, entity_id)
