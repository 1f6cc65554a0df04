"""Shared SQLAlchemy plumbing for entity repositories."""

import logging
from typing import AsyncIterator, Callable, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from myshop.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M")


class SqlAlchemyRepositoryBase(Generic[T, M]):
    """Add / get / query over one ORM model.

    Subclasses bind ``model`` and the two mapping functions, and may set
    ``load_options`` for eager loading of relationships.
    """

    model: Type[M]
    load_options: Sequence = ()

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    def _to_domain(self, model: M) -> T:
        raise NotImplementedError

    def _to_persistence(self, entity: T) -> M:
        raise NotImplementedError

    def _select(self):
        return select(self.model).options(*self.load_options)

    async def add(self, entity: T) -> None:
        """Insert entity and commit its own transaction."""
        try:
            self._session.add(self._to_persistence(entity))
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StorageError(f"Failed to add {self.model.__tablename__} record: {exc}") from exc

    async def get_by_id(self, entity_id) -> Optional[T]:
        try:
            result = await self._session.execute(
                self._select().where(self.model.id == str(entity_id))
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StorageError(f"Failed to load {self.model.__tablename__} {entity_id}: {exc}") from exc

        if model is None:
            logger.debug(f"{self.model.__tablename__} not found: {entity_id}")
            return None
        return self._to_domain(model)

    async def query(self, predicate: Optional[Callable[[T], bool]] = None) -> AsyncIterator[T]:
        try:
            result = await self._session.execute(self._select().order_by(self.model.pk))
            models = result.scalars()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StorageError(f"Failed to query {self.model.__tablename__}: {exc}") from exc

        for model in models:
            entity = self._to_domain(model)
            if predicate is None or predicate(entity):
                yield entity
