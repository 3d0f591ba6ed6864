"""
Commands loading records for list and detail views.

References are populated explicitly: the referenced records are loaded
alongside the primary ones and joined in memory. Independent lookups run
concurrently on separate sessions.

Example:
    ```python
    detail = await GetBookDetailCommand(session_factory).execute(book_id)
    print(detail.author.name, [g.name for g in detail.genres])
    ```
"""

from typing import Any
from uuid import UUID

from catalog.commands.base import StoreCommand
from catalog.exceptions import NotFoundError
from catalog.models import EntityKind
from catalog.repositories import (
    REPOSITORIES,
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)
from catalog.schemas.views import (
    AuthorDetail,
    BookDetail,
    BookInstanceDetail,
    BookInstanceListItem,
    BookListItem,
    GenreDetail,
)
from catalog.utils.concurrency import join


def _require(kind: EntityKind, entity: Any, entity_id: UUID) -> Any:
    if entity is None:
        raise NotFoundError(f"{kind.value.capitalize()} {entity_id} not found")
    return entity


class GetRecordCommand(StoreCommand[UUID, Any]):
    """
    Load one record of ``kind`` by identifier.

    Raises:
        NotFoundError: If no record has the identifier.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(self, entity_id: UUID) -> Any:
        entity = await self.read(
            REPOSITORIES[self.kind], lambda repo: repo.get_by_id(entity_id)
        )
        return _require(self.kind, entity, entity_id)


class GetBookGenreIdsCommand(StoreCommand[UUID, list[UUID]]):
    """Identifiers of the genres a book is linked to."""

    async def execute(self, book_id: UUID) -> list[UUID]:
        return await self.read(
            BookRepository, lambda repo: repo.get_genre_ids(book_id)
        )


class ListRecordsCommand(StoreCommand[None, list[Any]]):
    """
    Load every record of ``kind`` for its list view.

    Authors come sorted by family name, genres by name and books by title;
    books carry their author and copies their book.
    """

    def __init__(self, session_factory, kind: EntityKind):
        super().__init__(session_factory)
        self.kind = kind

    async def execute(self, input_data: None = None) -> list[Any]:
        if self.kind == EntityKind.BOOK:
            books, authors = await join(
                self.read(BookRepository, lambda repo: repo.get_all()),
                self.read(AuthorRepository, lambda repo: repo.get_all()),
            )
            by_id = {author.id: author for author in authors}
            return [
                BookListItem(book=book, author=by_id.get(book.author_id))
                for book in books
            ]

        if self.kind == EntityKind.BOOK_INSTANCE:
            instances, books = await join(
                self.read(BookInstanceRepository, lambda repo: repo.get_all()),
                self.read(BookRepository, lambda repo: repo.get_all()),
            )
            by_id = {book.id: book for book in books}
            return [
                BookInstanceListItem(
                    instance=instance, book=by_id.get(instance.book_id)
                )
                for instance in instances
            ]

        return await self.read(
            REPOSITORIES[self.kind], lambda repo: repo.get_all()
        )


class GetAuthorDetailCommand(StoreCommand[UUID, AuthorDetail]):
    """Author with the books they wrote."""

    async def execute(self, author_id: UUID) -> AuthorDetail:
        author, books = await join(
            self.read(AuthorRepository, lambda repo: repo.get_by_id(author_id)),
            self.read(BookRepository, lambda repo: repo.get_by_author(author_id)),
        )
        _require(EntityKind.AUTHOR, author, author_id)
        return AuthorDetail(author=author, books=books)


class GetGenreDetailCommand(StoreCommand[UUID, GenreDetail]):
    """Genre with the books linked to it."""

    async def execute(self, genre_id: UUID) -> GenreDetail:
        genre, books = await join(
            self.read(GenreRepository, lambda repo: repo.get_by_id(genre_id)),
            self.read(BookRepository, lambda repo: repo.get_by_genre(genre_id)),
        )
        _require(EntityKind.GENRE, genre, genre_id)
        return GenreDetail(genre=genre, books=books)


class GetBookDetailCommand(StoreCommand[UUID, BookDetail]):
    """Book with its author, genres and copies."""

    async def execute(self, book_id: UUID) -> BookDetail:
        book, genres, instances = await join(
            self.read(BookRepository, lambda repo: repo.get_by_id(book_id)),
            self.read(GenreRepository, lambda repo: repo.get_for_book(book_id)),
            self.read(
                BookInstanceRepository, lambda repo: repo.get_by_book(book_id)
            ),
        )
        _require(EntityKind.BOOK, book, book_id)

        author = await self.read(
            AuthorRepository, lambda repo: repo.get_by_id(book.author_id)
        )
        return BookDetail(
            book=book, author=author, genres=genres, instances=instances
        )


class GetBookInstanceDetailCommand(StoreCommand[UUID, BookInstanceDetail]):
    """Copy with the book it is a copy of."""

    async def execute(self, instance_id: UUID) -> BookInstanceDetail:
        instance = await self.read(
            BookInstanceRepository, lambda repo: repo.get_by_id(instance_id)
        )
        _require(EntityKind.BOOK_INSTANCE, instance, instance_id)

        book = await self.read(
            BookRepository, lambda repo: repo.get_by_id(instance.book_id)
        )
        return BookInstanceDetail(instance=instance, book=book)


DETAIL_COMMANDS: dict[EntityKind, type[StoreCommand]] = {
    EntityKind.AUTHOR: GetAuthorDetailCommand,
    EntityKind.BOOK: GetBookDetailCommand,
    EntityKind.GENRE: GetGenreDetailCommand,
    EntityKind.BOOK_INSTANCE: GetBookInstanceDetailCommand,
}
