from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from catalog.models.kinds import EntityKind


class GenreBase(SQLModel):
    name: str = Field(index=True)


class Genre(GenreBase, table=True):
    """
    SQLModel representing a genre.

    Names are kept unique by looking them up before insert; the table
    itself does not enforce it.
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    @property
    def url(self) -> str:
        return EntityKind.GENRE.locator(self.id)


class GenreDraft(GenreBase):
    """Candidate genre built from a normalized form."""

    id: UUID | None = None

    def to_columns(self) -> dict:
        return self.model_dump(exclude={"id"})
