"""Application layer - services and DTOs."""

from .dtos import (
    CreateOrderRequest,
    CreateProductRequest,
    CustomerDTO,
    LineItemDTO,
    OrderDTO,
    ProductDTO,
)
from .services import OrderApplicationService, ProductApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "CreateProductRequest",
    "CustomerDTO",
    "LineItemDTO",
    "OrderDTO",
    "ProductDTO",
    # Services
    "OrderApplicationService",
    "ProductApplicationService",
]
