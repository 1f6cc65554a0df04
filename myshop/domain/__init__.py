"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, LineItem, Order, Product
from .exceptions import DomainError, ProductNotFound, StorageError, ValidationError
from .repositories import OrderRepository, ProductRepository, Repository
from .value_objects import Money, OrderId, ProductId

__all__ = [
    "Customer",
    "DomainError",
    "LineItem",
    "Money",
    "Order",
    "OrderId",
    "OrderRepository",
    "Product",
    "ProductId",
    "ProductNotFound",
    "ProductRepository",
    "Repository",
    "StorageError",
    "ValidationError",
]
