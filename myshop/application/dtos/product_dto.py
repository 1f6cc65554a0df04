"""Application DTOs for Product operations."""

from decimal import Decimal

from pydantic import Field

from .order_dto import CamelModel


class CreateProductRequest(CamelModel):
    """Request DTO for creating a product."""

    name: str = Field(..., description="Product name")
    price_amount: Decimal = Field(..., description="Unit price amount")
    price_currency: str = Field(default="USD", description="Currency code")


class ProductDTO(CamelModel):
    """Response DTO for product details."""

    id: str
    name: str
    price_amount: Decimal
    price_currency: str
