"""Tests for draft building and derived model fields."""

from datetime import date
from uuid import uuid4

import pytest

from catalog.drafts import build_draft, build_update_draft
from catalog.exceptions import InvalidIdentifierError
from catalog.models import (
    AuthorDraft,
    BookDraft,
    BookInstanceDraft,
    BookInstanceStatus,
    EntityKind,
    GenreDraft,
)
from tests.factories import make_author, make_book, make_instance


class TestBuildDraft:
    """Tests for build_draft and build_update_draft."""

    def test_create_draft_has_no_id(self):
        draft = build_draft(EntityKind.GENRE, {"name": "Poetry"})

        assert isinstance(draft, GenreDraft)
        assert draft.id is None

    def test_update_draft_carries_id(self):
        entity_id = uuid4()

        draft = build_update_draft(
            EntityKind.AUTHOR,
            {"first_name": "Jane", "family_name": "Austen"},
            entity_id,
        )

        assert isinstance(draft, AuthorDraft)
        assert draft.id == entity_id

    def test_update_draft_requires_id(self):
        with pytest.raises(ValueError):
            build_update_draft(EntityKind.GENRE, {"name": "Poetry"}, None)

    def test_book_draft_keeps_references_as_strings(self):
        author_id = uuid4()
        genre_id = uuid4()

        draft = build_draft(
            EntityKind.BOOK,
            {
                "title": "Emma",
                "author": str(author_id),
                "summary": "s",
                "isbn": "i",
                "genre": [str(genre_id)],
            },
        )

        assert isinstance(draft, BookDraft)
        assert draft.author == str(author_id)
        assert draft.to_columns()["author_id"] == author_id
        assert draft.genre_ids() == [genre_id]


class TestDraftColumns:
    """Tests for converting drafts to stored columns."""

    def test_invalid_author_reference(self):
        draft = BookDraft(
            title="Emma", author="not-an-id", summary="s", isbn="i"
        )

        with pytest.raises(InvalidIdentifierError):
            draft.to_columns()

    def test_genre_ids_drop_duplicates_in_order(self):
        first, second = uuid4(), uuid4()
        draft = BookDraft(
            title="Emma",
            author=str(uuid4()),
            summary="s",
            isbn="i",
            genre=[str(second), str(first), str(second).upper()],
        )

        assert draft.genre_ids() == [second, first]

    def test_instance_columns(self):
        book_id = uuid4()
        draft = BookInstanceDraft(
            book=str(book_id),
            imprint="Penguin",
            status=BookInstanceStatus.LOANED,
            due_back=date(2024, 1, 2),
        )

        assert draft.to_columns() == {
            "book_id": book_id,
            "imprint": "Penguin",
            "status": BookInstanceStatus.LOANED,
            "due_back": date(2024, 1, 2),
        }


class TestDerivedFields:
    """Tests for name, lifespan, url and date renderings."""

    def test_author_name(self):
        assert make_author().name == "Austen, Jane"

    def test_lifespan(self):
        author = make_author(
            date_of_birth=date(1902, 6, 6), date_of_death=date(1968, 12, 20)
        )

        assert author.lifespan == "June 6th, 1902 - December 20th, 1968"

    def test_lifespan_with_missing_dates(self):
        assert make_author().lifespan == " - "
        assert (
            make_author(date_of_birth=date(1775, 12, 16)).lifespan
            == "December 16th, 1775 - "
        )

    def test_urls(self):
        author = make_author()
        book = make_book(author)
        instance = make_instance(book)

        assert author.url == f"/author/{author.id}"
        assert book.url == f"/book/{book.id}"
        assert instance.url == f"/bookinstance/{instance.id}"

    def test_due_back_rendering(self):
        instance = make_instance(
            make_book(make_author()), due_back=date(2024, 3, 22)
        )

        assert instance.due_back_formatted == "March 22nd, 2024"
        assert instance.due_back_iso == "2024-03-22"
        assert instance.status_label == "Maintenance"

    def test_list_paths(self):
        assert EntityKind.BOOK_INSTANCE.list_path == "/bookinstances"
        assert EntityKind.GENRE.locator("x") == "/genre/x"
