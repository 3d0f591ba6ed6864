"""
Base command for encapsulating catalog operations.

The Command pattern encapsulates business logic as objects, making it
reusable across HTTP routes and the CLI and easy to test in isolation.

Commands receive a session factory instead of a session: every store call
opens its own session, so independent lookups of one operation can run
concurrently.

Example:
    ```python
    class CountGenresCommand(StoreCommand[None, int]):
        async def execute(self, input_data: None = None) -> int:
            return await self.read(GenreRepository, lambda repo: repo.count())


    @router.get("/genres/count")
    async def count_genres(session_factory: SessionFactoryDep) -> int:
        return await CountGenresCommand(session_factory).execute()
    ```
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Generic, TypeVar

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories import BaseRepository
from catalog.storage.db import session_scope

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")
TRepository = TypeVar("TRepository", bound=BaseRepository)
TResult = TypeVar("TResult")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Type Parameters:
        TInput: Input data type.
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            NotFoundError: When a referenced record does not exist.
            InvalidIdentifierError: When an identifier cannot be parsed.
            SQLAlchemyError: For unexpected storage failures.
        """
        pass


class StoreCommand(BaseCommand[TInput, TOutput]):
    """
    Command backed by the catalog store.

    Attributes:
        session_factory: Factory opening one session per store call.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def read(
        self,
        repository_cls: Callable[[AsyncSession], TRepository],
        call: Callable[[TRepository], Awaitable[TResult]],
    ) -> TResult:
        """
        Run ``call`` against a repository on a session of its own.

        Args:
            repository_cls: Repository class to instantiate.
            call: Coroutine function receiving the repository.

        Returns:
            Whatever ``call`` returns.
        """
        async with session_scope(self.session_factory) as session:
            return await call(repository_cls(session))
