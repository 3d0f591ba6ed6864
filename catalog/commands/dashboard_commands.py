"""Dashboard counts of the catalog."""

from catalog.commands.base import StoreCommand
from catalog.repositories import (
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)
from catalog.schemas.views import CatalogCounts
from catalog.utils.concurrency import join


class GetCatalogCountsCommand(StoreCommand[None, CatalogCounts]):
    """
    Count books, copies, available copies, authors and genres.

    The five counts run concurrently, each on its own session. Every count
    is attempted; if any fails the whole command fails.
    """

    async def execute(self, input_data: None = None) -> CatalogCounts:
        books, bookinstances, available, authors, genres = await join(
            self.read(BookRepository, lambda repo: repo.count()),
            self.read(BookInstanceRepository, lambda repo: repo.count()),
            self.read(BookInstanceRepository, lambda repo: repo.count_available()),
            self.read(AuthorRepository, lambda repo: repo.count()),
            self.read(GenreRepository, lambda repo: repo.count()),
        )
        return CatalogCounts(
            books=books,
            bookinstances=bookinstances,
            available=available,
            authors=authors,
            genres=genres,
        )
