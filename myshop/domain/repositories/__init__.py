"""Repository ports."""

from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .repository import Repository

__all__ = [
    "OrderRepository",
    "ProductRepository",
    "Repository",
]
