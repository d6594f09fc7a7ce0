"""
Request-scoped providers for the author endpoints.

Each request gets its own session and an ``AuthorRepository`` bound to it.
Tests point ``get_session`` at another database through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from author_service.repositories.author_repository import AuthorRepository
from author_service.storage.db import get_session

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_author_repository(session: SessionDep) -> AuthorRepository:
    return AuthorRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
