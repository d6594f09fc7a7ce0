"""
Generic table access shared by the author and author-info repositories.

A repository is bound to one session and issues one statement per
operation. Writes run inside ``transaction()``: commit on success, roll
back on every failure path.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from author_service.exceptions import (
    NotFoundError,
    StorageConstraintError,
    ValidationError,
)
from author_service.logging import logger

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Insert, update, delete, lookup and counting for table model ``T``."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    @asynccontextmanager
    async def transaction(self, action: str) -> AsyncIterator[None]:
        """
        Scope a unit of work: commit on success, roll back on any failure.

        Integrity errors are translated to StorageConstraintError; other
        errors are re-raised unchanged after the rollback.

        Args:
            action: Verb used in log messages (e.g. "creating").
        """
        try:
            yield
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                f"Constraint violation while {action} {self.model.__name__}: {e.orig}"
            )
            raise StorageConstraintError(
                f"{self.model.__name__} violates a storage constraint"
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error {action} {self.model.__name__}: {e}")
            raise
        except Exception:
            await self.session.rollback()
            raise

    async def find_by_id(self, id: int) -> T | None:
        """Row with primary key ``id``, or None. A miss is not an error."""
        return await self.session.get(self.model, id)

    async def list_all(self) -> list[T]:
        """
        Get every stored entity, in no particular order.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            result = await self.session.exec(select(self.model))
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Listing {self.model.__name__} rows failed: {e}")
            raise

    async def count(self) -> int:
        """
        Count stored entities.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            result = await self.session.exec(
                select(func.count(self.model.id))  # type: ignore[attr-defined]
            )
            return result.one()
        except SQLAlchemyError as e:
            logger.error(f"Counting {self.model.__name__} rows failed: {e}")
            raise

    async def insert(self, entity: T) -> T:
        """
        Store a new entity. The id is always generated by the database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with its id populated.

        Raises:
            StorageConstraintError: If a storage constraint is violated.
            SQLAlchemyError: If database operation fails.
        """
        entity.id = None  # type: ignore[attr-defined]
        async with self.transaction("creating"):
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """
        Overwrite every field of the stored row matching ``entity.id``.

        Rows are never created here: an unknown id is rejected.

        Args:
            entity: Entity carrying the id and the new field values.

        Returns:
            The stored entity after the update.

        Raises:
            ValidationError: If the entity has no id.
            NotFoundError: If no row matches the id.
            StorageConstraintError: If a storage constraint is violated.
        """
        entity_id = entity.id  # type: ignore[attr-defined]
        if entity_id is None:
            raise ValidationError(f"{self.model.__name__} id is required")

        async with self.transaction("updating"):
            stored = await self.session.get(self.model, entity_id)
            if stored is None:
                raise NotFoundError(
                    f"{self.model.__name__} with id {entity_id} not found"
                )
            for key, value in entity.model_dump(exclude={"id"}).items():
                setattr(stored, key, value)
            self.session.add(stored)
            await self.session.flush()
            await self.session.refresh(stored)
        return stored

    async def delete(self, id: int) -> None:
        """
        Delete the row with the given id.

        Args:
            id: Primary key of the row to delete.

        Raises:
            NotFoundError: If no row matches the id.
        """
        async with self.transaction("deleting"):
            entity = await self.session.get(self.model, id)
            if entity is None:
                raise NotFoundError(
                    f"{self.model.__name__} with id {id} not found"
                )
            await self.session.delete(entity)
