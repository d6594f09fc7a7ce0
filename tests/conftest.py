"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for mocked sessions, a temporary
SQLite database and an HTTP client bound to it.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Keep error logs out of the working tree during tests
os.environ.setdefault("LOG_FILE_PATH", os.devnull)

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from author_service import application
from author_service.storage.db import build_engine, get_session


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Provides an async engine on a fresh SQLite file with all tables created.

    Yields:
        AsyncEngine: Engine bound to the temporary database
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'authors.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the temporary database."""
    return async_sessionmaker(
        db_engine, expire_on_commit=False, class_=AsyncSession
    )


@pytest_asyncio.fixture
async def db_session(session_factory):
    """
    Provides a real AsyncSession on the temporary database.

    Yields:
        AsyncSession: Open session, closed after the test
    """
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """
    Provides an HTTP client for the full application.

    Every request gets its own session on the temporary database.

    Yields:
        AsyncClient: Client talking to the app in-process
    """
    app = application()

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
