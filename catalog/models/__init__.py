from catalog.models.author import Author, AuthorDraft
from catalog.models.book import Book, BookDraft, BookGenreLink
from catalog.models.book_instance import (
    BookInstance,
    BookInstanceDraft,
    BookInstanceStatus,
)
from catalog.models.genre import Genre, GenreDraft
from catalog.models.kinds import EntityKind

__all__ = [
    "Author",
    "AuthorDraft",
    "Book",
    "BookDraft",
    "BookGenreLink",
    "BookInstance",
    "BookInstanceDraft",
    "BookInstanceStatus",
    "EntityKind",
    "Genre",
    "GenreDraft",
]
