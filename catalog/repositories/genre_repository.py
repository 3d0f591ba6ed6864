"""
Repository for Genre entity with name lookups.

Example:
    ```python
    async with async_session() as session:
        repo = GenreRepository(session)
        fiction = await repo.get_by_name("Fiction")
    ```
"""

from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models import BookGenreLink, Genre
from catalog.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre entity operations."""

    default_order = "name"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Genre)

    async def get_by_name(self, name: str) -> Genre | None:
        """
        Get genre by exact name match.

        Args:
            name: Exact (already sanitized) genre name.

        Returns:
            Genre if found, None otherwise.
        """
        stmt = select(Genre).where(Genre.name == name)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_for_book(self, book_id: UUID) -> list[Genre]:
        """Genres linked to a book, sorted by name."""
        stmt = (
            select(Genre)
            .join(BookGenreLink, col(BookGenreLink.genre_id) == Genre.id)
            .where(BookGenreLink.book_id == book_id)
            .order_by(Genre.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
