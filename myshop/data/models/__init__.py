"""Database models."""

from .base import Base
from .order_model import LineItemModel, OrderModel
from .product_model import ProductModel

__all__ = ["Base", "LineItemModel", "OrderModel", "ProductModel"]
