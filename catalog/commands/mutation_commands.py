"""
Commands persisting drafts.

Each command works on one session, committed when it completes. The
outcome carries the locator of the affected record, used as the redirect
target of the request.

Example:
    ```python
    draft = build_draft(EntityKind.GENRE, {"name": "Fantasy"})
    result = await CreateRecordCommand(session_factory, EntityKind.GENRE).execute(draft)
    return RedirectResponse(result.locator, status_code=303)
    ```
"""

from typing import Any

from pydantic import BaseModel

from catalog.commands.base import StoreCommand
from catalog.drafts import Draft
from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models import BookDraft, EntityKind
from catalog.repositories import REPOSITORIES, BookRepository, GenreRepository
from catalog.storage.db import session_scope
from catalog.utils.metrics import catalog_mutations_total


class MutationResult(BaseModel):
    """
    Outcome of a create or update.

    Attributes:
        entity: The stored record.
        locator: Canonical path of the record.
        created: False when no new record was written.
    """

    entity: Any
    locator: str
    created: bool = True


class CreateRecordCommand(StoreCommand[Draft, MutationResult]):
    """
    Store a draft as a new record of ``kind``.

    A genre whose name already exists is not stored again; the existing
    record is returned instead. A book is linked to its genres.

    Raises:
        InvalidIdentifierError: If a reference of the draft cannot be parsed.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(self, draft: Draft) -> MutationResult:
        columns = draft.to_columns()
        genre_ids = draft.genre_ids() if isinstance(draft, BookDraft) else None

        async with session_scope(self.session_factory) as session:
            repo = REPOSITORIES[self.kind](session)

            if self.kind == EntityKind.GENRE:
                existing = await GenreRepository(session).get_by_name(
                    columns["name"]
                )
                if existing:
                    logger.info(
                        f"Genre {existing.name!r} exists, not creating it again"
                    )
                    return MutationResult(
                        entity=existing, locator=existing.url, created=False
                    )

            entity = await repo.create(repo.model(**columns))
            if genre_ids is not None:
                await BookRepository(session).set_genres(entity.id, genre_ids)

        catalog_mutations_total.labels(
            entity=self.kind.value, operation="create"
        ).inc()
        logger.info(f"Created {self.kind.value} {entity.id}")
        return MutationResult(entity=entity, locator=entity.url)


class UpdateRecordCommand(StoreCommand[Draft, MutationResult]):
    """
    Replace the mutable fields of the record identified by the draft.

    A book's genre links are replaced by the draft's genres.

    Raises:
        ValueError: If the draft carries no identifier.
        NotFoundError: If no record has the draft's identifier.
        InvalidIdentifierError: If a reference of the draft cannot be parsed.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(self, draft: Draft) -> MutationResult:
        if draft.id is None:
            raise ValueError(f"Update of {self.kind.value} requires an identifier")

        columns = draft.to_columns()
        genre_ids = draft.genre_ids() if isinstance(draft, BookDraft) else None

        async with session_scope(self.session_factory) as session:
            repo = REPOSITORIES[self.kind](session)
            entity = await repo.get_by_id(draft.id)
            if entity is None:
                raise NotFoundError(
                    f"{self.kind.value.capitalize()} {draft.id} not found"
                )

            for key, value in columns.items():
                setattr(entity, key, value)
            entity = await repo.update(entity)
            if genre_ids is not None:
                await BookRepository(session).set_genres(entity.id, genre_ids)

        catalog_mutations_total.labels(
            entity=self.kind.value, operation="update"
        ).inc()
        logger.info(f"Updated {self.kind.value} {entity.id}")
        return MutationResult(entity=entity, locator=entity.url)
