"""
Generic Repository SQLAlchemy Implementation

Provides the soft-delete aware CRUD operations every entity repository
builds on.
"""

import logging
from typing import Any, Optional

from sqlalchemy import Select, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from viaggia.db.unit_of_work import commit_unit_of_work
from viaggia.repositories.base import Repository, T

logger = logging.getLogger(__name__)


class SQLAlchemyRepository(Repository[T]):
    """
    Generic Repository SQLAlchemy Implementation

    Subclasses bind their entity through the ``model`` class attribute;
    ad-hoc repositories pass it to the constructor instead.
    """

    model: Optional[type] = None

    def __init__(self, session: AsyncSession, model: Optional[type[T]] = None):
        """
        Initialize Repository

        Args:
            session: Async database session (the unit of work)
            model: Mapped entity class, defaults to the class attribute

        Raises:
            TypeError: No entity class was given
        """
        model = model or type(self).model
        if model is None:
            raise TypeError(f"{type(self).__name__} requires a model")
        self.session = session
        self.model = model
        self._pk = inspect(model).primary_key[0]

    def for_model(self, model: type) -> "SQLAlchemyRepository[Any]":
        """
        Get a repository for another entity sharing this session

        Work staged through it is committed by either repository's
        save_changes().
        """
        return SQLAlchemyRepository(self.session, model)

    def _scoped(
        self,
        stmt: Select,
        include_inactive: bool = False,
        model: Optional[type] = None,
    ) -> Select:
        """Restrict a statement to active rows of ``model`` unless told otherwise"""
        if include_inactive:
            return stmt
        model = model or self.model
        return stmt.where(model.is_active.is_(True))

    async def get_all(self, include_inactive: bool = False) -> list[T]:
        """Get all entities"""
        stmt = self._scoped(select(self.model), include_inactive).order_by(self._pk)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, id: int, include_inactive: bool = False) -> Optional[T]:
        """Get entity by ID"""
        stmt = self._scoped(
            select(self.model).where(self._pk == id), include_inactive
        )
        result = await self.session.execute(stmt)
        entity = result.scalar_one_or_none()
        if entity is None:
            logger.debug("%s %s not found", self.model.__name__, id)
        return entity

    async def exists(self, id: int, include_inactive: bool = False) -> bool:
        """Check whether an entity with this ID exists"""
        stmt = self._scoped(
            select(self._pk).where(self._pk == id), include_inactive
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, entity: T) -> T:
        """Stage insertion of a new entity"""
        if entity is None:
            raise ValueError("entity must not be None")
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """
        Stage modification of an entity

        Entities already tracked by the session are returned as-is; detached
        ones are merged and the session's copy is returned.
        """
        if entity is None:
            raise ValueError("entity must not be None")
        if entity in self.session:
            return entity
        return await self.session.merge(entity)

    async def _set_active(self, id: int, active: bool) -> bool:
        # Direct key lookup, so already inactive rows are reachable
        entity = await self.session.get(self.model, id)
        if entity is None:
            logger.info(
                "%s %s not found, nothing to %s",
                self.model.__name__,
                id,
                "reactivate" if active else "soft delete",
            )
            return False
        entity.is_active = active
        return True

    async def soft_delete(self, id: int) -> bool:
        """Stage is_active=False"""
        found = await self._set_active(id, False)
        if found:
            logger.info("Soft deleted %s %s", self.model.__name__, id)
        return found

    async def reactivate(self, id: int) -> bool:
        """Stage is_active=True"""
        found = await self._set_active(id, True)
        if found:
            logger.info("Reactivated %s %s", self.model.__name__, id)
        return found

    async def save_changes(self) -> bool:
        """Commit the unit of work"""
        rows = await commit_unit_of_work(self.session)
        logger.debug("Committed %d row change(s)", rows)
        return rows > 0
