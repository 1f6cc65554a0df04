"""Data layer - infrastructure persistence and mapping."""

from .mappers import LineItemMapper, OrderMapper, ProductMapper
from .models import Base, LineItemModel, OrderModel, ProductModel
from .repositories import SqlAlchemyOrderRepository, SqlAlchemyProductRepository

__all__ = [
    "Base",
    "LineItemMapper",
    "LineItemModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
]
