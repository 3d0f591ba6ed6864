"""
Tests for the mutation and query commands.

Commands open their own sessions, so they run against a temporary SQLite
database; session failures are simulated with a mocked factory.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from catalog.commands.mutation_commands import (
    CreateRecordCommand,
    UpdateRecordCommand,
)
from catalog.commands.query_commands import (
    GetAuthorDetailCommand,
    GetBookDetailCommand,
    GetBookGenreIdsCommand,
    GetBookInstanceDetailCommand,
    GetGenreDetailCommand,
    GetRecordCommand,
    ListRecordsCommand,
)
from catalog.drafts import build_draft, build_update_draft
from catalog.exceptions import InvalidIdentifierError, NotFoundError
from catalog.models import (
    AuthorDraft,
    BookDraft,
    BookInstanceStatus,
    EntityKind,
    GenreDraft,
)
from catalog.repositories import GenreRepository
from tests.factories import (
    link,
    make_author,
    make_book,
    make_genre,
    make_instance,
    store,
)


class TestCreateRecordCommand:
    """Tests for CreateRecordCommand."""

    @pytest.mark.asyncio
    async def test_create_author(self, session_factory):
        command = CreateRecordCommand(session_factory, EntityKind.AUTHOR)

        result = await command.execute(
            AuthorDraft(
                first_name="Jane",
                family_name="Austen",
                date_of_birth=date(1775, 12, 16),
            )
        )

        assert result.created
        assert result.locator == f"/author/{result.entity.id}"
        stored = await GetRecordCommand(
            session_factory, EntityKind.AUTHOR
        ).execute(result.entity.id)
        assert stored.name == "Austen, Jane"
        assert stored.date_of_birth == date(1775, 12, 16)

    @pytest.mark.asyncio
    async def test_create_existing_genre_returns_existing(self, session_factory):
        fantasy = await store(session_factory, make_genre("Fantasy"))
        command = CreateRecordCommand(session_factory, EntityKind.GENRE)

        result = await command.execute(GenreDraft(name="Fantasy"))

        assert not result.created
        assert result.locator == f"/genre/{fantasy.id}"
        async with session_factory() as session:
            assert await GenreRepository(session).count() == 1

    @pytest.mark.asyncio
    async def test_create_book_links_genres(self, session_factory):
        author = make_author()
        fiction, drama = make_genre("Fiction"), make_genre("Drama")
        await store(session_factory, author, fiction, drama)

        result = await CreateRecordCommand(
            session_factory, EntityKind.BOOK
        ).execute(
            BookDraft(
                title="Emma",
                author=str(author.id),
                summary="s",
                isbn="i",
                genre=[str(fiction.id), str(drama.id)],
            )
        )

        genre_ids = await GetBookGenreIdsCommand(session_factory).execute(
            result.entity.id
        )
        assert set(genre_ids) == {fiction.id, drama.id}
        assert result.entity.author_id == author.id

    @pytest.mark.asyncio
    async def test_create_with_malformed_reference(self, session_factory):
        command = CreateRecordCommand(session_factory, EntityKind.BOOK)

        with pytest.raises(InvalidIdentifierError):
            await command.execute(
                BookDraft(title="Emma", author="nope", summary="s", isbn="i")
            )

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self):
        session = AsyncMock()
        session.__aenter__.return_value = session
        session.add = MagicMock()
        session.flush.side_effect = OperationalError("INSERT", {}, Exception())
        session_factory = MagicMock(return_value=session)

        with pytest.raises(OperationalError):
            await CreateRecordCommand(
                session_factory, EntityKind.AUTHOR
            ).execute(AuthorDraft(first_name="Jane", family_name="Austen"))


class TestUpdateRecordCommand:
    """Tests for UpdateRecordCommand."""

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, session_factory):
        author = await store(session_factory, make_author())
        draft = build_update_draft(
            EntityKind.AUTHOR,
            {"first_name": "Cassandra", "family_name": "Austen"},
            author.id,
        )

        result = await UpdateRecordCommand(
            session_factory, EntityKind.AUTHOR
        ).execute(draft)

        assert result.locator == author.url
        assert result.entity.first_name == "Cassandra"

    @pytest.mark.asyncio
    async def test_update_with_unchanged_data_is_idempotent(
        self, session_factory
    ):
        author = make_author()
        book = make_book(author)
        genre = make_genre()
        await store(session_factory, author, genre, book, link(book, genre))
        cleaned = {
            "title": book.title,
            "author": str(author.id),
            "summary": book.summary,
            "isbn": book.isbn,
            "genre": [str(genre.id)],
        }
        command = UpdateRecordCommand(session_factory, EntityKind.BOOK)

        first = await command.execute(
            build_update_draft(EntityKind.BOOK, cleaned, book.id)
        )
        second = await command.execute(
            build_update_draft(EntityKind.BOOK, cleaned, book.id)
        )

        assert first.locator == second.locator == book.url
        assert first.entity.model_dump() == second.entity.model_dump()
        assert await GetBookGenreIdsCommand(session_factory).execute(
            book.id
        ) == [genre.id]

    @pytest.mark.asyncio
    async def test_update_missing_record(self, session_factory):
        draft = build_update_draft(EntityKind.GENRE, {"name": "X"}, uuid4())

        with pytest.raises(NotFoundError):
            await UpdateRecordCommand(
                session_factory, EntityKind.GENRE
            ).execute(draft)

    @pytest.mark.asyncio
    async def test_update_requires_identifier(self, session_factory):
        with pytest.raises(ValueError):
            await UpdateRecordCommand(
                session_factory, EntityKind.GENRE
            ).execute(build_draft(EntityKind.GENRE, {"name": "X"}))


class TestQueryCommands:
    """Tests for list and detail commands."""

    @pytest.mark.asyncio
    async def test_get_record_not_found(self, session_factory):
        with pytest.raises(NotFoundError):
            await GetRecordCommand(session_factory, EntityKind.BOOK).execute(
                uuid4()
            )

    @pytest.mark.asyncio
    async def test_book_list_populates_author(self, session_factory):
        author = make_author()
        await store(session_factory, author, make_book(author, "Emma"))

        items = await ListRecordsCommand(
            session_factory, EntityKind.BOOK
        ).execute()

        assert [(i.book.title, i.author.name) for i in items] == [
            ("Emma", "Austen, Jane")
        ]

    @pytest.mark.asyncio
    async def test_instance_list_populates_book(self, session_factory):
        author = make_author()
        book = make_book(author)
        await store(session_factory, author, book, make_instance(book))

        items = await ListRecordsCommand(
            session_factory, EntityKind.BOOK_INSTANCE
        ).execute()

        assert items[0].book.id == book.id

    @pytest.mark.asyncio
    async def test_genre_list_sorted(self, session_factory):
        await store(session_factory, make_genre("Poetry"), make_genre("Drama"))

        genres = await ListRecordsCommand(
            session_factory, EntityKind.GENRE
        ).execute()

        assert [g.name for g in genres] == ["Drama", "Poetry"]

    @pytest.mark.asyncio
    async def test_book_detail(self, session_factory):
        author, genre = make_author(), make_genre()
        book = make_book(author)
        copy = make_instance(book, status=BookInstanceStatus.LOANED)
        await store(session_factory, author, genre, book, link(book, genre), copy)

        detail = await GetBookDetailCommand(session_factory).execute(book.id)

        assert detail.author.id == author.id
        assert [g.id for g in detail.genres] == [genre.id]
        assert [i.id for i in detail.instances] == [copy.id]

    @pytest.mark.asyncio
    async def test_author_and_genre_detail(self, session_factory):
        author, genre = make_author(), make_genre()
        book = make_book(author)
        await store(session_factory, author, genre, book, link(book, genre))

        author_detail = await GetAuthorDetailCommand(session_factory).execute(
            author.id
        )
        genre_detail = await GetGenreDetailCommand(session_factory).execute(
            genre.id
        )

        assert [b.id for b in author_detail.books] == [book.id]
        assert [b.id for b in genre_detail.books] == [book.id]

    @pytest.mark.asyncio
    async def test_instance_detail(self, session_factory):
        author = make_author()
        book = make_book(author)
        copy = make_instance(book)
        await store(session_factory, author, book, copy)

        detail = await GetBookInstanceDetailCommand(session_factory).execute(
            copy.id
        )

        assert detail.book.title == book.title

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "command_cls",
        [
            GetAuthorDetailCommand,
            GetBookDetailCommand,
            GetGenreDetailCommand,
            GetBookInstanceDetailCommand,
        ],
    )
    async def test_detail_not_found(self, session_factory, command_cls):
        with pytest.raises(NotFoundError):
            await command_cls(session_factory).execute(uuid4())
