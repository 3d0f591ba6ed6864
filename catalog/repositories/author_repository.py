"""
Repository for Author entity.

Authors are listed by family name; everything else is inherited from
BaseRepository.
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository for Author entity operations."""

    default_order = "family_name"

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)
