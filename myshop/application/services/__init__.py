"""Application services."""
from .order_service import OrderApplicationService
from .product_service import ProductApplicationService

__all__ = ["OrderApplicationService", "ProductApplicationService"]
