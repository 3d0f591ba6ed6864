from datetime import date
from enum import Enum
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from catalog.models.kinds import EntityKind
from catalog.utils.dates import format_iso_date, format_long_date
from catalog.utils.identifiers import parse_identifier


class BookInstanceStatus(str, Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class BookInstanceBase(SQLModel):
    imprint: str
    status: BookInstanceStatus = Field(
        default=BookInstanceStatus.MAINTENANCE, index=True
    )
    due_back: date | None = None

    @property
    def status_label(self) -> str:
        return BookInstanceStatus(self.status).value

    @property
    def due_back_formatted(self) -> str:
        return format_long_date(self.due_back)

    @property
    def due_back_iso(self) -> str:
        return format_iso_date(self.due_back)


class BookInstance(BookInstanceBase, table=True):
    """
    SQLModel representing a physical copy of a book.

    Attributes:
        id: Store-assigned identifier
        book_id: The book this is a copy of
        imprint: Publisher and edition text
        status: Circulation status
        due_back: Date the copy is due back, if loaned
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    book_id: UUID = Field(foreign_key="book.id", index=True)

    @property
    def url(self) -> str:
        return EntityKind.BOOK_INSTANCE.locator(self.id)


class BookInstanceDraft(BookInstanceBase):
    """Candidate copy built from a normalized form."""

    id: UUID | None = None
    book: str

    def to_columns(self) -> dict:
        columns = self.model_dump(exclude={"id", "book"})
        columns["book_id"] = parse_identifier(self.book)
        return columns
