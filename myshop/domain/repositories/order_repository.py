"""Repository interface for Order aggregate."""

from ..entities.order import Order
from ..value_objects import OrderId
from .repository import Repository


class OrderRepository(Repository[Order, OrderId]):
    """Abstract repository for Order aggregate persistence."""
