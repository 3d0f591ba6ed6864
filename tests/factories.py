"""
Factory functions for catalog records used across tests.

Records are built with sensible defaults; ``store`` persists them.
"""

from catalog.models import (
    Author,
    Book,
    BookGenreLink,
    BookInstance,
    BookInstanceStatus,
    Genre,
)


def make_author(first_name="Jane", family_name="Austen", **kwargs) -> Author:
    return Author(first_name=first_name, family_name=family_name, **kwargs)


def make_genre(name="Fiction", **kwargs) -> Genre:
    return Genre(name=name, **kwargs)


def make_book(author: Author, title="Emma", **kwargs) -> Book:
    kwargs.setdefault("summary", "A novel about youthful hubris")
    kwargs.setdefault("isbn", "9780141439587")
    return Book(title=title, author_id=author.id, **kwargs)


def make_instance(
    book: Book,
    imprint="Penguin, 2003",
    status=BookInstanceStatus.MAINTENANCE,
    **kwargs,
) -> BookInstance:
    return BookInstance(book_id=book.id, imprint=imprint, status=status, **kwargs)


def link(book: Book, genre: Genre) -> BookGenreLink:
    return BookGenreLink(book_id=book.id, genre_id=genre.id)


async def store(session_factory, *records):
    """Persist ``records`` in one transaction and return them."""
    async with session_factory() as session:
        session.add_all(records)
        await session.commit()
    return records if len(records) != 1 else records[0]
