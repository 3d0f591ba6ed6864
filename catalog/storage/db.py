import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import catalog.models  # noqa: F401  (registers tables on SQLModel.metadata)
from catalog.exceptions import DatabaseError
from catalog.logging import logger
from catalog.settings import app_settings


def create_engine(url: str | None = None) -> AsyncEngine:
    """
    Create the async engine for ``url`` (defaults to settings).

    Pool sizing only applies to server databases; SQLite uses the
    driver's default pool.
    """
    url = url or app_settings.DATABASE_URL
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)
    return create_async_engine(
        url,
        echo=False,
        pool_size=app_settings.DB_POOL_SIZE,
        max_overflow=app_settings.DB_MAX_OVERFLOW,
        pool_recycle=app_settings.DB_POOL_RECYCLE,
        pool_pre_ping=app_settings.DB_POOL_PRE_PING,
    )


def create_session_factory(
    bind: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


engine: AsyncEngine = create_engine()
async_session = create_session_factory(engine)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create all catalog tables that do not exist yet."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Wait until the database is available, then create missing tables.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES

    Raises:
        DatabaseError: If the database never became reachable.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    for attempt in range(max_retries):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            break
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)
    else:
        logger.error("Failed to connect to the database after multiple attempts.")
        raise DatabaseError("Database connection could not be established.")

    if app_settings.DB_CREATE_TABLES:
        await init_db()
        logger.info("Initialized database tables")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory used by commands.

    Commands open one session per store call so that independent lookups
    can run concurrently; override this dependency in tests to point the
    application at another database.
    """
    return async_session


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Open a session and commit it when the block succeeds.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
