"""
Base repository with common CRUD operations.

The Repository pattern separates data access logic from business logic,
making it easier to test and maintain. Repositories encapsulate all
database operations for a specific entity.

Example:
    ```python
    from catalog.repositories.base import BaseRepository
    from catalog.models import Genre


    class GenreRepository(BaseRepository[Genre]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Genre)

        async def get_by_name(self, name: str) -> Genre | None:
            stmt = select(Genre).where(Genre.name == name)
            result = await self.session.exec(stmt)
            return result.first()
    ```
"""

from typing import Any, Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
        default_order: Column name used to sort ``get_all`` results,
            or None to keep store order.
    """

    default_order: str | None = None

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    def _filtered(self, stmt: Any, filters: dict[str, Any]) -> Any:
        for key, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)
        return stmt

    async def get_by_id(self, id: UUID) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, id)

    async def get_all(self, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters.

        Args:
            **filters: Field name and value pairs to filter by.
                Example: get_all(status=BookInstanceStatus.AVAILABLE)

        Returns:
            List of entities matching all filters, sorted by
            ``default_order`` when set.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = self._filtered(select(self.model), filters)
            if self.default_order:
                stmt = stmt.order_by(getattr(self.model, self.default_order))
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise

    async def count(self, **filters: Any) -> int:
        """
        Count entities matching the provided filters.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = self._filtered(
                select(func.count()).select_from(self.model), filters
            )
            result = await self.session.exec(stmt)
            return int(result.one())
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    async def update(self, entity: T) -> T:
        """
        Update existing entity in database.

        Args:
            entity: The entity instance with updated values.

        Returns:
            The updated entity.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    async def delete(self, entity: T) -> None:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise
