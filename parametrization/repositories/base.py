"""
Base repository with common data-access operations.
"""

from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic, Type
from sqlalchemy import Select, select, func, delete
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from parametrization.core.exceptions import StoreUnavailable
from parametrization.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def store_errors() -> Iterator[None]:
    """Re-raise connection level database errors as StoreUnavailable."""
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        raise StoreUnavailable("store", f"Database unavailable: {e.orig or e}") from e


class BaseRepository(Generic[ModelT]):
    """
    Base repository for models with an integer primary key.

    Write operations commit before returning, so once a call comes back the
    change is visible to every other session.

    Usage:
        class ParametrizationRepository(BaseRepository[ParametrizationModel]):
            model = ParametrizationModel

        repo = ParametrizationRepository(db)
        model = await repo.get_by_id(1)
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self) -> Select:
        """Base query - override to add default filters or ordering."""
        return select(self.model)

    async def get_by_id(self, id: int) -> ModelT | None:
        """Get entity by ID."""
        stmt = self._base_query().where(self.model.id == id)
        with store_errors():
            result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_one(self, **filters) -> ModelT | None:
        """Get single entity by filters."""
        stmt = self._base_query()
        for field, value in filters.items():
            stmt = stmt.where(getattr(self.model, field) == value)
        with store_errors():
            result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def all(self) -> list[ModelT]:
        """Get all entities (no pagination)."""
        with store_errors():
            result = await self.db.execute(self._base_query())
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count all entities."""
        stmt = select(func.count()).select_from(self.model)
        with store_errors():
            return await self.db.scalar(stmt) or 0

    async def delete_by_id(self, id: int) -> int:
        """
        Hard delete by ID.

        Returns rows affected. A missing ID deletes nothing and is not an error.
        """
        stmt = delete(self.model).where(self.model.id == id)
        with store_errors():
            result = await self.db.execute(stmt)
            await self.db.commit()
        return result.rowcount
