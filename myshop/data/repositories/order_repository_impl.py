"""SQLAlchemy implementation of OrderRepository."""

from sqlalchemy.orm import selectinload

from myshop.domain.entities.order import Order
from myshop.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderModel
from .base import SqlAlchemyRepositoryBase


class SqlAlchemyOrderRepository(SqlAlchemyRepositoryBase[Order, OrderModel], OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    model = OrderModel
    load_options = (selectinload(OrderModel.line_items),)

    def _to_domain(self, model: OrderModel) -> Order:
        return OrderMapper.to_domain(model)

    def _to_persistence(self, entity: Order) -> OrderModel:
        return OrderMapper.to_persistence(entity)
