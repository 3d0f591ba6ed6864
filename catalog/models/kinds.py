from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Entity types of the catalog, valued by their URL segment."""

    AUTHOR = "author"
    BOOK = "book"
    GENRE = "genre"
    BOOK_INSTANCE = "bookinstance"

    @property
    def list_path(self) -> str:
        """Path of the list view, e.g. ``/authors``."""
        return f"/{self.value}s"

    def locator(self, entity_id: Any) -> str:
        """Canonical path of a single record, e.g. ``/author/<id>``."""
        return f"/{self.value}/{entity_id}"
