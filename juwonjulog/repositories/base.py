# juwonjulog/repositories/base.py
from abc import ABC, abstractmethod
from typing import Optional, List, Generic, TypeVar

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository class defining the standard CRUD interface."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Retrieve a single entity by its ID."""
        pass

    @abstractmethod
    async def get_all(self, offset: int = 0, limit: int = 10) -> List[T]:
        """Retrieve one page of entities, newest first."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with its assigned ID."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> Optional[T]:
        """Persist changes to an existing entity. Returns None if it no longer exists."""
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete an entity. Returns True if successful."""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every entity. Returns the number of deleted rows."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored entities."""
        pass
