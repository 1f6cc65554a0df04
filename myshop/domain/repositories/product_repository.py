"""Repository interface for Product entity."""

from ..entities.product import Product
from ..value_objects import ProductId
from .repository import Repository


class ProductRepository(Repository[Product, ProductId]):
    """Abstract repository for Product persistence."""
