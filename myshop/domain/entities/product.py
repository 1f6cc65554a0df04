"""Product entity."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..exceptions import ValidationError
from ..value_objects import Money, ProductId

PRICE_SCALE = Decimal("0.01")


@dataclass(frozen=True)
class Product:
    """A catalogue product. Immutable once created."""
    id: ProductId
    name: str
    price: Money

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.is_negative():
            raise ValidationError(f"Product price cannot be negative: {self.price}")
        # Prices are stored with two decimal places
        try:
            cents = self.price.amount.quantize(PRICE_SCALE)
        except InvalidOperation:
            raise ValidationError(f"Invalid product price: {self.price}")
        if cents != self.price.amount:
            raise ValidationError(
                f"Product price cannot have more than 2 decimal places: {self.price}"
            )
        object.__setattr__(self, 'price', Money(amount=cents, currency=self.price.currency))

    @classmethod
    def create(cls, name: str, price: Money) -> "Product":
        """Create a product with a freshly generated identifier."""
        return cls(id=ProductId.generate(), name=name, price=price)
