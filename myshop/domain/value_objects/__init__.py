"""Domain value objects."""

from .value_objects import Money, OrderId, ProductId

__all__ = [
    "Money",
    "OrderId",
    "ProductId",
]
