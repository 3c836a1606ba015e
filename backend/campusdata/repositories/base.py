"""
Campus Data Backend — Generic Repository
=========================================

What:  Data-access base class giving every entity the same named operations:
       get_by_id, get_all, exists_by_id, save, delete_by_id.
Why:   Keeps SQL out of services and routes; each entity repository is a
       one-line subclass plus any custom finders it declares.
How:   Every method issues a SQLAlchemy Core/ORM statement with bound
       parameters on the request's AsyncSession. Nothing commits here; the
       session dependency commits once the request succeeds.

Example:
    class UCSBDateRepository(Repository[UCSBDate, int]):
        model = UCSBDate

    repo = UCSBDateRepository(db)
    date = await repo.get_by_id(7)          # → UCSBDate | None
"""

from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.database import Base

ModelT = TypeVar("ModelT", bound=Base)
KeyT = TypeVar("KeyT")


class Repository(Generic[ModelT, KeyT]):
    """Per-entity persistence access bound to one request's session."""

    model: ClassVar[Type[Any]]

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    def entity_name(cls) -> str:
        """Name used in client-visible messages, e.g. 'UCSBDate'."""
        return cls.model.__name__

    @classmethod
    def _key_column(cls):
        # Every entity in this API has a single-column primary key
        return inspect(cls.model).primary_key[0]

    @classmethod
    def key_name(cls) -> str:
        """Attribute holding the identifier, e.g. 'id' or 'code'."""
        return cls._key_column().key

    async def get_by_id(self, key: KeyT) -> Optional[ModelT]:
        """SELECT ... WHERE <pk> = :key; None when absent."""
        result = await self.db.execute(
            select(self.model).where(self._key_column() == key)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[ModelT]:
        """Every row, ordered by primary key so listings are stable."""
        result = await self.db.execute(
            select(self.model).order_by(self._key_column())
        )
        return list(result.scalars().all())

    async def exists_by_id(self, key: KeyT) -> bool:
        result = await self.db.execute(
            select(func.count()).select_from(self.model).where(self._key_column() == key)
        )
        return (result.scalar() or 0) > 0

    async def save(self, entity: ModelT) -> ModelT:
        """
        Insert or update the entity and flush so generated keys are assigned.

        Works for both new objects and objects loaded in this session: the
        session tracks attribute changes, so an update is just mutate-then-save.
        """
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def delete_by_id(self, key: KeyT) -> int:
        """DELETE ... WHERE <pk> = :key; returns the number of rows removed."""
        result = await self.db.execute(
            delete(self.model).where(self._key_column() == key)
        )
        return result.rowcount or 0
