"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import List, Sequence

from ..exceptions import ValidationError
from ..value_objects import OrderId, ProductId


@dataclass(frozen=True)
class Customer:
    """Customer snapshot embedded in an order. Every field is required."""
    name: str
    shipping_address: str
    city: str
    postal_code: str
    country: str

    def __post_init__(self):
        missing = [
            f.name for f in fields(self)
            if not isinstance(getattr(self, f.name), str) or not getattr(self, f.name).strip()
        ]
        if missing:
            raise ValidationError(f"Missing customer fields: {', '.join(missing)}")


@dataclass(frozen=True)
class LineItem:
    """A (product reference, quantity) pair within an order."""
    product_id: ProductId
    quantity: int

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity < 1:
            raise ValidationError(
                f"Quantity must be at least 1 for product {self.product_id}, got: {self.quantity}"
            )


@dataclass
class Order:
    """
    Order aggregate root.

    Created exactly once by the order creation workflow and never mutated
    after it has been persisted.
    """
    id: OrderId
    customer: Customer
    line_items: List[LineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.line_items:
            raise ValidationError("An order must contain at least one line item")
        self.line_items = list(self.line_items)

    @classmethod
    def create(cls, customer: Customer, line_items: Sequence[LineItem]) -> "Order":
        """Build a new order with a fresh id and the current UTC timestamp."""
        return cls(
            id=OrderId.generate(),
            customer=customer,
            line_items=list(line_items),
            created_at=datetime.now(timezone.utc),
        )

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)

    def product_ids(self) -> List[ProductId]:
        """Product references in line-item order (duplicates kept)."""
        return [item.product_id for item in self.line_items]
