"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from uuid import UUID, uuid4

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValidationError(f"Invalid money amount: {self.amount!r}")

        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValidationError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __mul__(self, quantity: int) -> 'Money':
        return Money(amount=self.amount * quantity, currency=self.currency)

    def is_negative(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class _EntityId:
    value: UUID

    @classmethod
    def generate(cls):
        """Generate a fresh random identifier."""
        return cls(value=uuid4())

    @classmethod
    def parse(cls, raw):
        """Build an identifier from a UUID or its string form.

        Raises:
            ValidationError: If ``raw`` is not a valid UUID
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, UUID):
            return cls(value=raw)
        try:
            return cls(value=UUID(str(raw)))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid {cls.__name__}: {raw!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductId(_EntityId):
    """Unique product token."""


@dataclass(frozen=True)
class OrderId(_EntityId):
    """Order identifier, assigned once when the order is created."""
