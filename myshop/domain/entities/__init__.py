"""Domain entities."""

from .order import Customer, LineItem, Order
from .product import Product

__all__ = [
    "Customer",
    "LineItem",
    "Order",
    "Product",
]
