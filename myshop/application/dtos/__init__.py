"""Application DTOs."""

from .order_dto import CreateOrderRequest, CustomerDTO, LineItemDTO, OrderDTO
from .product_dto import CreateProductRequest, ProductDTO

__all__ = [
    "CreateOrderRequest",
    "CreateProductRequest",
    "CustomerDTO",
    "LineItemDTO",
    "OrderDTO",
    "ProductDTO",
]
