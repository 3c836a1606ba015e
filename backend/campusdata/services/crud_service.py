"""
Campus Data Backend — Resource Service (CRUD Orchestrator)
===========================================================

What:  The list/get/create/update/delete behaviour shared by every resource.
Why:   Every campus resource follows the same rules; writing them once means
       a new resource only declares its model, repository and route params.
How:   A stateless CrudService is instantiated once per resource with its
       repository class. Each call receives the request's AsyncSession, builds
       a repository on it, and translates misses and store failures into
       application exceptions.

Rules enforced here:
    - get/update/delete on an absent key → EntityNotFoundError (never a no-op)
    - update overwrites every mutable field from a complete *Fields model;
      the identifier itself is never changed
    - create on a natural-key resource with a taken key → ConflictError;
      surrogate-key resources never deduplicate
    - delete returns "<Entity> with id <key> deleted"
    - any SQLAlchemy failure → DatabaseError (details logged, not returned)

Authorization is NOT checked here; controllers run the capability check
before calling into the service, so a rejected caller never reaches the store.
"""

import logging
from typing import Generic, List, Type

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campusdata.exceptions import ConflictError, DatabaseError, EntityNotFoundError
from campusdata.repositories.base import KeyT, ModelT, Repository

logger = logging.getLogger(__name__)


class CrudService(Generic[ModelT, KeyT]):
    """
    Business logic for one resource type.

    Args:
        repository_class: Repository subclass bound to the resource's model.
        natural_key: True when clients choose the identifier (dining commons
            code, organization code) and duplicates must be rejected.
    """

    def __init__(
        self,
        repository_class: Type[Repository[ModelT, KeyT]],
        natural_key: bool = False,
    ):
        self.repository_class = repository_class
        self.natural_key = natural_key

    @property
    def entity_name(self) -> str:
        return self.repository_class.entity_name()

    def repository(self, db: AsyncSession) -> Repository[ModelT, KeyT]:
        return self.repository_class(db)

    async def list_all(self, db: AsyncSession) -> List[ModelT]:
        """Every record of the resource, no filtering or pagination."""
        try:
            return await self.repository(db).get_all()
        except SQLAlchemyError as e:
            raise self._database_error("list", e)

    async def get(self, db: AsyncSession, key: KeyT) -> ModelT:
        """
        Retrieve a single record.

        Raises:
            EntityNotFoundError: No record has this key (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            entity = await self.repository(db).get_by_id(key)
        except SQLAlchemyError as e:
            raise self._database_error("get", e, key)

        if entity is None:
            raise EntityNotFoundError(self.entity_name, key)
        return entity

    async def create(self, db: AsyncSession, entity: ModelT) -> ModelT:
        """
        Persist a new record and return it with its assigned identifier.

        Raises:
            ConflictError: Natural key already in use (→ 409)
            DatabaseError: Insert failed (→ 500)
        """
        repo = self.repository(db)
        key = getattr(entity, repo.key_name())

        if self.natural_key:
            if await repo.exists_by_id(key):
                raise ConflictError(self.entity_name, key)

        try:
            saved = await repo.save(entity)
        except IntegrityError as e:
            # A concurrent insert can win the race between the check and the insert
            if self.natural_key:
                raise ConflictError(self.entity_name, key) from e
            raise self._database_error("create", e)
        except SQLAlchemyError as e:
            raise self._database_error("create", e)

        logger.info(
            "Created %s with id %s",
            self.entity_name,
            getattr(saved, repo.key_name()),
        )
        return saved

    async def update(self, db: AsyncSession, key: KeyT, fields: BaseModel) -> ModelT:
        """
        Replace every mutable field of an existing record.

        `fields` is the resource's complete *Fields model; FastAPI has already
        rejected bodies with missing fields, so nothing from the old record
        survives an update.
        """
        entity = await self.get(db, key)

        for name, value in fields.model_dump().items():
            setattr(entity, name, value)

        try:
            saved = await self.repository(db).save(entity)
        except SQLAlchemyError as e:
            raise self._database_error("update", e, key)

        logger.info("Updated %s with id %s", self.entity_name, key)
        return saved

    async def delete(self, db: AsyncSession, key: KeyT) -> str:
        """Remove the record and return the confirmation message."""
        # Lookup first so a second delete reports NotFound instead of succeeding
        await self.get(db, key)

        try:
            await self.repository(db).delete_by_id(key)
        except SQLAlchemyError as e:
            raise self._database_error("delete", e, key)

        logger.info("Deleted %s with id %s", self.entity_name, key)
        return f"{self.entity_name} with id {key} deleted"

    def _database_error(self, operation: str, error: Exception, key=None) -> DatabaseError:
        logger.error(
            "Database error during %s of %s (key=%s): %s",
            operation,
            self.entity_name,
            key,
            str(error),
        )
        return DatabaseError(
            message=f"Could not {operation} {self.entity_name}. Please try again.",
            context={"entity": self.entity_name, "error_type": type(error).__name__},
        )
