"""
Commands guarding deletes against dangling references.

An author or genre is referenced by books and a book by its copies. A
record with dependents is never deleted; the caller gets the dependents
to show why. A record that no longer exists counts as deleted.

Example:
    ```python
    try:
        outcome = await DeleteRecordCommand(session_factory, kind).execute(entity_id)
    except DependencyExistsError as ex:
        return render_delete_view(ex.entity, ex.dependents)
    return RedirectResponse(outcome.redirect, status_code=303)
    ```
"""

from typing import Any, Awaitable, Callable
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.commands.base import StoreCommand
from catalog.exceptions import DependencyExistsError
from catalog.logging import logger
from catalog.models import EntityKind
from catalog.repositories import (
    REPOSITORIES,
    BookInstanceRepository,
    BookRepository,
)
from catalog.utils.concurrency import join
from catalog.utils.metrics import (
    catalog_deletions_blocked_total,
    catalog_mutations_total,
)

# Repository and lookup returning the records referencing an entity
DEPENDENTS: dict[EntityKind, tuple[type, Callable[[Any, UUID], Awaitable[list]]]] = {
    EntityKind.AUTHOR: (BookRepository, lambda repo, id: repo.get_by_author(id)),
    EntityKind.GENRE: (BookRepository, lambda repo, id: repo.get_by_genre(id)),
    EntityKind.BOOK: (
        BookInstanceRepository,
        lambda repo, id: repo.get_by_book(id),
    ),
}


async def _delete_by_id(repo: Any, entity_id: UUID) -> None:
    entity = await repo.get_by_id(entity_id)
    if entity is not None:
        await repo.delete(entity)


class DeletionContext(BaseModel):
    """
    A record and the records that reference it.

    Attributes:
        entity: The record, or None when it does not exist.
        dependents: Records referencing it.
    """

    entity: Any = None
    dependents: list[Any] = Field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return bool(self.dependents)


class DeletionOutcome(BaseModel):
    """
    Result of a permitted delete.

    Attributes:
        redirect: List view of the entity kind.
        deleted: False when the record was already gone.
    """

    redirect: str
    deleted: bool


class GetDeletionContextCommand(StoreCommand[UUID, DeletionContext]):
    """Load a record and its dependents concurrently."""

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def _dependents(self, entity_id: UUID) -> list[Any]:
        if self.kind not in DEPENDENTS:
            return []
        repository_cls, lookup = DEPENDENTS[self.kind]
        return await self.read(
            repository_cls, lambda repo: lookup(repo, entity_id)
        )

    async def execute(self, entity_id: UUID) -> DeletionContext:
        entity, dependents = await join(
            self.read(
                REPOSITORIES[self.kind], lambda repo: repo.get_by_id(entity_id)
            ),
            self._dependents(entity_id),
        )
        return DeletionContext(entity=entity, dependents=dependents)


class DeleteRecordCommand(StoreCommand[UUID, DeletionOutcome]):
    """
    Delete a record unless other records reference it.

    Raises:
        DependencyExistsError: If dependents exist; nothing is deleted.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(self, entity_id: UUID) -> DeletionOutcome:
        context = await GetDeletionContextCommand(
            self.session_factory, self.kind
        ).execute(entity_id)

        if context.entity is None:
            logger.info(
                f"{self.kind.value.capitalize()} {entity_id} already absent"
            )
            return DeletionOutcome(redirect=self.kind.list_path, deleted=False)

        if context.blocked:
            catalog_deletions_blocked_total.labels(entity=self.kind.value).inc()
            raise DependencyExistsError(context.entity, context.dependents)

        await self.read(
            REPOSITORIES[self.kind], lambda repo: _delete_by_id(repo, entity_id)
        )
        catalog_mutations_total.labels(
            entity=self.kind.value, operation="delete"
        ).inc()
        logger.info(f"Deleted {self.kind.value} {entity_id}")
        return DeletionOutcome(redirect=self.kind.list_path, deleted=True)
