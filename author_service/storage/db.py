import asyncio
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from author_service.logging import logger
from author_service.models import author, author_info  # noqa: F401
from author_service.settings import app_settings


def engine_options(url: str) -> dict[str, Any]:
    """
    Build keyword arguments for create_async_engine.

    SQLite URLs get no pool sizing since their pools do not accept it.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        Engine keyword arguments.
    """
    options: dict[str, Any] = {"echo": False}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=app_settings.DB_POOL_SIZE,
            max_overflow=app_settings.DB_MAX_OVERFLOW,
            pool_recycle=app_settings.DB_POOL_RECYCLE,
            pool_pre_ping=app_settings.DB_POOL_PRE_PING,
        )
    return options


def _sqlite_case_sensitive_like(dbapi_connection, connection_record) -> None:
    # SQLite LIKE ignores ASCII case unless this pragma is on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like=ON")
    cursor.close()


def build_engine(url: str) -> AsyncEngine:
    """
    Create the async engine for ``url``.

    Author searches must respect case on every backend, so SQLite
    connections switch on ``case_sensitive_like`` when they are opened.
    """
    new_engine = create_async_engine(url, **engine_options(url))
    if new_engine.dialect.name == "sqlite":
        event.listen(
            new_engine.sync_engine, "connect", _sqlite_case_sensitive_like
        )
    return new_engine


engine: AsyncEngine = build_engine(app_settings.database_url)
async_session = async_sessionmaker(
    engine, expire_on_commit=False, class_=AsyncSession
)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Wait until the database is available and create missing tables.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES

    Raises:
        RuntimeError: If the database is still unreachable after all retries.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    for attempt in range(max_retries):
        try:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database reachable, tables ensured")
            return
        except OperationalError:
            if attempt == max_retries - 1:
                break
            logger.warning(
                f"Database unavailable (attempt {attempt + 1}/{max_retries}), "
                f"next try in {retry_interval}s"
            )
            await asyncio.sleep(retry_interval)

    logger.error(f"Giving up on the database after {max_retries} attempts")
    raise RuntimeError("Database connection could not be established.")


async def get_session() -> AsyncSession:
    """
    Get an asynchronous session from the session factory.

    The session is closed when the request ends; repositories commit or
    roll back their own transactions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with async_session() as session:
        yield session
