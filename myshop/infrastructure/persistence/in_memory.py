"""
In-memory repository implementations.

Dictionary-backed storage for demos and tests. One instance per entity type.
"""
import logging
from typing import AsyncIterator, Callable, Dict, Generic, Optional, TypeVar

from myshop.domain.entities.order import Order
from myshop.domain.entities.product import Product
from myshop.domain.exceptions import StorageError
from myshop.domain.repositories import OrderRepository, ProductRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _InMemoryStore(Generic[T]):

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._storage: Dict[str, T] = {}
        logger.info(f"{type(self).__name__} initialized (in-memory storage)")

    async def add(self, entity: T) -> None:
        key = str(entity.id)
        if key in self._storage:
            raise StorageError(f"{type(entity).__name__} {key} already exists")
        self._storage[key] = entity
        logger.debug(f"Stored {type(entity).__name__} {entity.id}")

    async def get_by_id(self, entity_id) -> Optional[T]:
        return self._storage.get(str(entity_id))

    async def query(self, predicate: Optional[Callable[[T], bool]] = None) -> AsyncIterator[T]:
        # Snapshot so concurrent adds do not break iteration
        for entity in list(self._storage.values()):
            if predicate is None or predicate(entity):
                yield entity

    def __len__(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Clear all records (for demo/testing)."""
        self._storage.clear()


class InMemoryOrderRepository(_InMemoryStore[Order], OrderRepository):
    """In-memory implementation of OrderRepository."""


class InMemoryProductRepository(_InMemoryStore[Product], ProductRepository):
    """In-memory implementation of ProductRepository."""
