"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal

from myshop.domain.entities.order import Customer, LineItem, Order
from myshop.domain.entities.product import Product
from myshop.domain.value_objects import Money, OrderId, ProductId

from .models.order_model import LineItemModel, OrderModel
from .models.product_model import ProductModel


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=ProductId.parse(model.id),
            name=model.name,
            price=Money(
                amount=Decimal(str(model.price_amount)),
                currency=model.price_currency,
            ),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=str(entity.id),
            name=entity.name,
            price_amount=entity.price.amount,
            price_currency=entity.price.currency,
        )


class LineItemMapper:
    """Static mapper for LineItem ↔ LineItemModel transformation."""

    @staticmethod
    def to_domain(model: LineItemModel) -> LineItem:
        return LineItem(product_id=ProductId.parse(model.product_id), quantity=model.quantity)

    @staticmethod
    def to_persistence(entity: LineItem, position: int) -> LineItemModel:
        return LineItemModel(
            position=position,
            product_id=str(entity.product_id),
            quantity=entity.quantity,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested line items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested line items).

        Args:
            model: OrderModel instance with ``line_items`` loaded

        Returns:
            Order domain aggregate
        """
        return Order(
            id=OrderId.parse(model.id),
            customer=Customer(
                name=model.customer_name,
                shipping_address=model.shipping_address,
                city=model.city,
                postal_code=model.postal_code,
                country=model.country,
            ),
            line_items=[LineItemMapper.to_domain(item) for item in model.line_items],
            created_at=_as_utc(model.created_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested line items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=str(entity.id),
            customer_name=entity.customer.name,
            shipping_address=entity.customer.shipping_address,
            city=entity.customer.city,
            postal_code=entity.customer.postal_code,
            country=entity.customer.country,
            created_at=entity.created_at,
        )
        order_model.line_items = [
            LineItemMapper.to_persistence(item, position)
            for position, item in enumerate(entity.line_items)
        ]
        return order_model
