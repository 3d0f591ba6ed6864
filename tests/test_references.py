"""Tests for form option sets and selection marking."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from catalog.models import EntityKind
from catalog.references import ResolveFormOptionsCommand, mark_selected
from tests.factories import make_author, make_book, make_genre, store


class TestMarkSelected:
    """Tests for mark_selected."""

    def test_only_selected_option_is_flagged(self):
        a, b, c = (
            SimpleNamespace(id=uuid4(), name=name) for name in "ABC"
        )

        options = mark_selected([a, b, c], [str(b.id)])

        assert [(o.label, o.selected) for o in options] == [
            ("A", False),
            ("B", True),
            ("C", False),
        ]

    def test_compares_identifier_strings_not_objects(self):
        genre = SimpleNamespace(id=uuid4(), name="Poetry")
        same_id_other_object = str(genre.id).upper()

        options = mark_selected([genre], [same_id_other_object])

        assert options[0].selected
        assert options[0].id == str(genre.id)

    def test_nothing_selected(self):
        genre = SimpleNamespace(id=uuid4(), name="Poetry")

        assert not mark_selected([genre], [])[0].selected

    def test_custom_label(self):
        book = SimpleNamespace(id=uuid4(), title="Emma")

        assert mark_selected([book], [], label="title")[0].label == "Emma"


class TestResolveFormOptionsCommand:
    """Tests for ResolveFormOptionsCommand."""

    @pytest.mark.asyncio
    async def test_book_form_options(self, session_factory):
        tolstoy, austen = make_author("Leo", "Tolstoy"), make_author()
        poetry, drama = make_genre("Poetry"), make_genre("Drama")
        await store(session_factory, tolstoy, austen, poetry, drama)

        options = await ResolveFormOptionsCommand(
            session_factory, EntityKind.BOOK
        ).execute({"author": str(tolstoy.id), "genre": [str(poetry.id)]})

        assert [(o.label, o.selected) for o in options["authors"]] == [
            ("Austen, Jane", False),
            ("Tolstoy, Leo", True),
        ]
        assert [(o.label, o.selected) for o in options["genres"]] == [
            ("Drama", False),
            ("Poetry", True),
        ]

    @pytest.mark.asyncio
    async def test_single_genre_value(self, session_factory):
        poetry = await store(session_factory, make_genre("Poetry"))

        options = await ResolveFormOptionsCommand(
            session_factory, EntityKind.BOOK
        ).execute({"genre": str(poetry.id)})

        assert options["genres"][0].selected
        assert options["authors"] == []

    @pytest.mark.asyncio
    async def test_instance_form_options(self, session_factory):
        author = make_author()
        persuasion, emma = make_book(author, "Persuasion"), make_book(author, "Emma")
        await store(session_factory, author, persuasion, emma)

        options = await ResolveFormOptionsCommand(
            session_factory, EntityKind.BOOK_INSTANCE
        ).execute({"book": str(emma.id)})

        assert [(o.label, o.selected) for o in options["books"]] == [
            ("Emma", True),
            ("Persuasion", False),
        ]

    @pytest.mark.asyncio
    async def test_kinds_without_references(self, session_factory):
        for kind in (EntityKind.AUTHOR, EntityKind.GENRE):
            assert (
                await ResolveFormOptionsCommand(session_factory, kind).execute(
                    {}
                )
                == {}
            )
