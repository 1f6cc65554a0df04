"""Application DTOs for Order operations."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CustomerDTO(CamelModel):
    """DTO for the customer block of an order.

    Fields are optional here so that missing and blank values are both
    reported by the domain as one ValidationError.
    """

    name: Optional[str] = Field(None, description="Customer full name")
    shipping_address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    postal_code: Optional[str] = Field(None, description="Postal code")
    country: Optional[str] = Field(None, description="Country")


class LineItemDTO(CamelModel):
    """DTO for order line item."""

    product_id: str = Field(..., description="Referenced product identifier")
    quantity: int = Field(..., description="Quantity ordered (at least 1)")


class CreateOrderRequest(CamelModel):
    """Request DTO for creating an order.

    Only the shape is checked here; business rules (non-blank customer
    fields, at least one line item, positive quantities) are enforced by
    the order workflow so they hold for every caller.
    """

    customer: Optional[CustomerDTO] = Field(None, description="Customer details")
    line_items: List[LineItemDTO] = Field(default_factory=list, description="Order line items")


class OrderDTO(CamelModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order identifier")
    customer: CustomerDTO
    line_items: List[LineItemDTO] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
