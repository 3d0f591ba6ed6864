from catalog.forms.base import Form, FormResult, form_to_dict
from catalog.forms.entities import (
    AuthorForm,
    BookForm,
    BookInstanceForm,
    GenreForm,
)
from catalog.models import EntityKind

FORMS: dict[EntityKind, type[Form]] = {
    EntityKind.AUTHOR: AuthorForm,
    EntityKind.BOOK: BookForm,
    EntityKind.GENRE: GenreForm,
    EntityKind.BOOK_INSTANCE: BookInstanceForm,
}

__all__ = [
    "FORMS",
    "AuthorForm",
    "BookForm",
    "BookInstanceForm",
    "Form",
    "FormResult",
    "GenreForm",
    "form_to_dict",
]
