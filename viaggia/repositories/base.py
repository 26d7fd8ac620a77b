"""
Base Repository Interface Module

Defines the soft-delete capability and the generic CRUD contract shared by
every entity repository.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SoftDeletable(Protocol):
    """
    Capability of every persisted entity: a mutable active flag.

    Inactive rows stay in the database and are hidden from default reads.
    """

    is_active: bool


T = TypeVar("T", bound=SoftDeletable)


class Repository(ABC, Generic[T]):
    """
    Generic Repository Interface

    Writes are staged on the session; nothing reaches the database until
    save_changes(). Every read excludes inactive rows unless the caller
    passes include_inactive=True.
    """

    @abstractmethod
    async def get_all(self, include_inactive: bool = False) -> list[T]:
        """Get all entities (active only by default)"""
        pass

    @abstractmethod
    async def get_by_id(self, id: int, include_inactive: bool = False) -> Optional[T]:
        """Get entity by ID, None when missing or inactive"""
        pass

    @abstractmethod
    async def exists(self, id: int, include_inactive: bool = False) -> bool:
        """Check whether an entity with this ID exists"""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Stage insertion of a new entity"""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Stage modification of an existing entity (no existence check)"""
        pass

    @abstractmethod
    async def soft_delete(self, id: int) -> bool:
        """Stage is_active=False; False when the ID does not exist"""
        pass

    @abstractmethod
    async def reactivate(self, id: int) -> bool:
        """Stage is_active=True; False when the ID does not exist"""
        pass

    @abstractmethod
    async def save_changes(self) -> bool:
        """Commit the unit of work; True if at least one row was written"""
        pass
