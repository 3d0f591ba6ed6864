"""
Repository for Book entity and its genre links.

Genre references are stored in ``BookGenreLink`` rows which this
repository keeps in sync with the book.
"""

from uuid import UUID

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models import Book, BookGenreLink
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    default_order = "title"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_by_author(self, author_id: UUID) -> list[Book]:
        """Books written by ``author_id``, sorted by title."""
        return await self.get_all(author_id=author_id)

    async def get_by_genre(self, genre_id: UUID) -> list[Book]:
        """Books linked to ``genre_id``, sorted by title."""
        stmt = (
            select(Book)
            .join(BookGenreLink, col(BookGenreLink.book_id) == Book.id)
            .where(BookGenreLink.genre_id == genre_id)
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_genre_ids(self, book_id: UUID) -> list[UUID]:
        """Identifiers of the genres linked to ``book_id``."""
        stmt = select(BookGenreLink.genre_id).where(
            BookGenreLink.book_id == book_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def set_genres(self, book_id: UUID, genre_ids: list[UUID]) -> None:
        """
        Replace the genre links of a book.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            await self.session.exec(
                sa_delete(BookGenreLink).where(
                    col(BookGenreLink.book_id) == book_id
                )
            )
            self.session.add_all(
                BookGenreLink(book_id=book_id, genre_id=genre_id)
                for genre_id in genre_ids
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error linking genres of Book {book_id}: {e}")
            raise

    async def delete(self, entity: Book) -> None:
        """Delete a book together with its own genre links."""
        await self.set_genres(entity.id, [])
        await super().delete(entity)
