"""
View models handed to the templates.

Related records are populated explicitly by the query commands; stored
models never load their references lazily.
"""

from pydantic import BaseModel, Field

from catalog.constants import DASHBOARD_LABELS
from catalog.models import Author, Book, BookInstance, Genre


class BookListItem(BaseModel):
    book: Book
    author: Author | None = None


class BookInstanceListItem(BaseModel):
    instance: BookInstance
    book: Book | None = None


class AuthorDetail(BaseModel):
    author: Author
    books: list[Book] = Field(default_factory=list)


class GenreDetail(BaseModel):
    genre: Genre
    books: list[Book] = Field(default_factory=list)


class BookDetail(BaseModel):
    book: Book
    author: Author | None = None
    genres: list[Genre] = Field(default_factory=list)
    instances: list[BookInstance] = Field(default_factory=list)


class BookInstanceDetail(BaseModel):
    instance: BookInstance
    book: Book | None = None


class CatalogCounts(BaseModel):
    """Record counts shown on the dashboard."""

    books: int
    bookinstances: int
    available: int
    authors: int
    genres: int

    def as_rows(self) -> list[tuple[str, int]]:
        """Counts paired with their display labels, in display order."""
        return list(
            zip(
                DASHBOARD_LABELS,
                (
                    self.books,
                    self.bookinstances,
                    self.available,
                    self.authors,
                    self.genres,
                ),
            )
        )
