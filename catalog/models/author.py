from datetime import date
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from catalog.constants import NAME_MAX_LENGTH
from catalog.models.kinds import EntityKind
from catalog.utils.dates import format_iso_date, format_long_date


class AuthorBase(SQLModel):
    """Mutable fields shared by the stored author and its drafts."""

    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    family_name: str = Field(max_length=NAME_MAX_LENGTH)
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @property
    def name(self) -> str:
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> str:
        return (
            f"{format_long_date(self.date_of_birth)} - "
            f"{format_long_date(self.date_of_death)}"
        )

    @property
    def date_of_birth_iso(self) -> str:
        return format_iso_date(self.date_of_birth)

    @property
    def date_of_death_iso(self) -> str:
        return format_iso_date(self.date_of_death)


class Author(AuthorBase, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Store-assigned identifier
        first_name: Given name, alphanumeric
        family_name: Family name, alphanumeric
        date_of_birth: Optional date of birth
        date_of_death: Optional date of death
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    @property
    def url(self) -> str:
        return EntityKind.AUTHOR.locator(self.id)


class AuthorDraft(AuthorBase):
    """Candidate author built from a normalized form."""

    id: UUID | None = None

    def to_columns(self) -> dict:
        return self.model_dump(exclude={"id"})
