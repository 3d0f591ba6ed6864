from catalog.models import EntityKind
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.base import BaseRepository
from catalog.repositories.book_instance_repository import (
    BookInstanceRepository,
)
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository

# Repository class managing each entity kind
REPOSITORIES: dict[EntityKind, type[BaseRepository]] = {
    EntityKind.AUTHOR: AuthorRepository,
    EntityKind.BOOK: BookRepository,
    EntityKind.GENRE: GenreRepository,
    EntityKind.BOOK_INSTANCE: BookInstanceRepository,
}

__all__ = [
    "REPOSITORIES",
    "AuthorRepository",
    "BaseRepository",
    "BookInstanceRepository",
    "BookRepository",
    "GenreRepository",
]
