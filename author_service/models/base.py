"""
Base model for all database tables with async relationship support.

This module provides the BaseModel class that all SQLModel table models
should inherit from. It includes SQLAlchemy's AsyncAttrs mixin so that
lazy-loaded attributes can be awaited in async contexts.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables.

    Example:
        class Author(BaseModel, table=True):
            __tablename__ = "autores"

            id: int | None = Field(default=None, primary_key=True)
            name: str = Field(max_length=45)
    """

    pass
