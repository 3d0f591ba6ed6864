from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from catalog.models.kinds import EntityKind
from catalog.utils.identifiers import parse_identifier


class BookBase(SQLModel):
    title: str
    summary: str
    isbn: str


class Book(BookBase, table=True):
    """
    SQLModel representing a book.

    The author reference is a plain foreign key column and the genre
    references live in ``BookGenreLink``. Related records are loaded
    explicitly by the reference resolver, never through lazy relationships.
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    author_id: UUID = Field(foreign_key="author.id", index=True)

    @property
    def url(self) -> str:
        return EntityKind.BOOK.locator(self.id)


class BookGenreLink(SQLModel, table=True):
    """Association between a book and one of its genres."""

    book_id: UUID = Field(foreign_key="book.id", primary_key=True)
    genre_id: UUID = Field(foreign_key="genre.id", primary_key=True)


class BookDraft(BookBase):
    """
    Candidate book built from a normalized form.

    References are kept as the submitted identifier strings so a rejected
    form can be re-rendered with exactly what the user selected.
    """

    id: UUID | None = None
    author: str
    genre: list[str] = Field(default_factory=list)

    def to_columns(self) -> dict:
        columns = self.model_dump(exclude={"id", "author", "genre"})
        columns["author_id"] = parse_identifier(self.author)
        return columns

    def genre_ids(self) -> list[UUID]:
        """Parsed genre references, duplicates dropped, order kept."""
        ids: list[UUID] = []
        for value in self.genre:
            genre_id = parse_identifier(value)
            if genre_id not in ids:
                ids.append(genre_id)
        return ids
