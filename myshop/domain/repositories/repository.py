"""Generic repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")

Predicate = Callable[[T], bool]


class Repository(ABC, Generic[T, ID]):
    """Abstract persistence port over one entity type.

    Implementations are bound to a single aggregate; do not share one
    concrete instance across unrelated entity types.
    """

    @abstractmethod
    async def add(self, entity: T) -> None:
        """Persist a new entity.

        Not idempotent: adding two distinct entities that are logically
        equal creates two records.

        Args:
            entity: Entity to persist

        Raises:
            StorageError: If the backing store fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: ID) -> Optional[T]:
        """Retrieve an entity by identifier.

        Args:
            entity_id: Identifier value object

        Returns:
            Entity if found, None otherwise

        Raises:
            StorageError: If the backing store fails
        """
        pass

    @abstractmethod
    def query(self, predicate: Optional[Predicate] = None) -> AsyncIterator[T]:
        """Lazily iterate over entities matching ``predicate``.

        Args:
            predicate: Optional filter; all entities when omitted

        Returns:
            Async iterator of entities in insertion order
        """
        pass
