"""Repository for BookInstance entity."""

from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models import BookInstance, BookInstanceStatus
from catalog.repositories.base import BaseRepository


class BookInstanceRepository(BaseRepository[BookInstance]):
    """Repository for BookInstance entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, BookInstance)

    async def get_by_book(self, book_id: UUID) -> list[BookInstance]:
        """Copies of ``book_id``."""
        return await self.get_all(book_id=book_id)

    async def count_available(self) -> int:
        return await self.count(status=BookInstanceStatus.AVAILABLE)
