"""Tests for the dashboard counts."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from catalog.commands.dashboard_commands import GetCatalogCountsCommand
from catalog.models import BookInstanceStatus
from catalog.schemas.views import CatalogCounts
from tests.factories import (
    make_author,
    make_book,
    make_genre,
    make_instance,
    store,
)


@pytest.mark.asyncio
async def test_counts(session_factory):
    """3 books, 5 copies (2 available), 2 authors and 4 genres."""
    austen, tolstoy = make_author(), make_author("Leo", "Tolstoy")
    books = [
        make_book(austen, "Emma"),
        make_book(austen, "Persuasion"),
        make_book(tolstoy, "War and Peace"),
    ]
    statuses = [
        BookInstanceStatus.AVAILABLE,
        BookInstanceStatus.AVAILABLE,
        BookInstanceStatus.LOANED,
        BookInstanceStatus.MAINTENANCE,
        BookInstanceStatus.RESERVED,
    ]
    copies = [
        make_instance(books[i % 3], status=status)
        for i, status in enumerate(statuses)
    ]
    genres = [make_genre(name) for name in ("A", "B", "C", "D")]
    await store(session_factory, austen, tolstoy, *books, *copies, *genres)

    counts = await GetCatalogCountsCommand(session_factory).execute()

    assert counts.model_dump() == {
        "books": 3,
        "bookinstances": 5,
        "available": 2,
        "authors": 2,
        "genres": 4,
    }


@pytest.mark.asyncio
async def test_empty_catalog(session_factory):
    counts = await GetCatalogCountsCommand(session_factory).execute()

    assert counts.as_rows() == [
        ("Books", 0),
        ("Copies", 0),
        ("Copies available", 0),
        ("Authors", 0),
        ("Genres", 0),
    ]


@pytest.mark.asyncio
async def test_one_failing_count_fails_all(session_factory):
    with patch(
        "catalog.repositories.genre_repository.GenreRepository.count",
        side_effect=OperationalError("SELECT", {}, Exception()),
    ):
        with pytest.raises(OperationalError):
            await GetCatalogCountsCommand(session_factory).execute()


def test_rows_follow_label_order():
    counts = CatalogCounts(
        books=3, bookinstances=5, available=2, authors=2, genres=4
    )

    assert counts.as_rows() == [
        ("Books", 3),
        ("Copies", 5),
        ("Copies available", 2),
        ("Authors", 2),
        ("Genres", 4),
    ]
