"""Forms of the four catalog entity kinds."""

from typing import Any

from catalog.constants import NAME_MAX_LENGTH
from catalog.forms.base import Form
from catalog.forms.fields import (
    ChoiceField,
    DateField,
    MultiValueField,
    ReferenceField,
    TextField,
)
from catalog.models import (
    Author,
    Book,
    BookInstance,
    BookInstanceStatus,
    Genre,
)


class AuthorForm(Form):
    fields = (
        TextField(
            "first_name",
            "First name must be specified.",
            alphanumeric_message="First name has non-alphanumeric characters.",
            max_length=NAME_MAX_LENGTH,
        ),
        TextField(
            "family_name",
            "Family name must be specified.",
            alphanumeric_message="Family name has non-alphanumeric characters.",
            max_length=NAME_MAX_LENGTH,
        ),
        DateField("date_of_birth", "Invalid date of birth"),
        DateField("date_of_death", "Invalid date of death"),
    )

    def initial(self, entity: Author) -> dict[str, Any]:
        return {
            "first_name": entity.first_name,
            "family_name": entity.family_name,
            "date_of_birth": entity.date_of_birth_iso,
            "date_of_death": entity.date_of_death_iso,
        }


class GenreForm(Form):
    fields = (TextField("name", "Genre name required"),)

    def initial(self, entity: Genre) -> dict[str, Any]:
        return {"name": entity.name}


class BookForm(Form):
    fields = (
        TextField("title", "Title must not be empty."),
        ReferenceField("author", "Author must not be empty."),
        TextField("summary", "Summary must not be empty."),
        TextField("isbn", "ISBN must not be empty"),
        MultiValueField("genre"),
    )

    def initial(
        self, entity: Book, genre_ids: list[Any] | None = None
    ) -> dict[str, Any]:
        return {
            "title": entity.title,
            "author": str(entity.author_id),
            "summary": entity.summary,
            "isbn": entity.isbn,
            "genre": [str(genre_id) for genre_id in genre_ids or []],
        }


class BookInstanceForm(Form):
    fields = (
        ReferenceField("book", "Book must be specified"),
        TextField("imprint", "Imprint must be specified"),
        ChoiceField(
            "status",
            BookInstanceStatus,
            BookInstanceStatus.MAINTENANCE,
            "Invalid status",
        ),
        DateField("due_back", "Invalid date"),
    )

    def initial(self, entity: BookInstance) -> dict[str, Any]:
        return {
            "book": str(entity.book_id),
            "imprint": entity.imprint,
            "status": BookInstanceStatus(entity.status).value,
            "due_back": entity.due_back_iso,
        }
