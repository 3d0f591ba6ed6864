"""
Dependency injection configuration for FastAPI.

Routes receive the session factory rather than a session: commands open
one session per store call. Tests point the application at another
database with ``app.dependency_overrides[get_session_factory]``.

Example:
    ```python
    @router.get("/authors")
    async def author_list(request: Request, session_factory: SessionFactoryDep):
        authors = await ListRecordsCommand(
            session_factory, EntityKind.AUTHOR
        ).execute()
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.storage.db import get_session_factory

SessionFactoryDep = Annotated[
    async_sessionmaker[AsyncSession], Depends(get_session_factory)
]
