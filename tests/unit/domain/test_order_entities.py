"""Tests for the Order aggregate, Product entity and value objects."""

from datetime import timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from myshop.domain.entities import Customer, LineItem, Order, Product
from myshop.domain.exceptions import ValidationError
from myshop.domain.value_objects import Money, OrderId, ProductId


def _customer(**overrides) -> Customer:
    fields = dict(
        name="Jon Doe",
        shipping_address="1 Queen St",
        city="Auckland",
        postal_code="1990",
        country="New Zealand",
    )
    fields.update(overrides)
    return Customer(**fields)


class TestCustomer:

    def test_all_fields_present(self):
        customer = _customer()
        assert customer.city == "Auckland"

    @pytest.mark.parametrize("field", ["name", "shipping_address", "city", "postal_code", "country"])
    def test_blank_field_rejected(self, field):
        with pytest.raises(ValidationError, match=field):
            _customer(**{field: "   "})


class TestLineItem:

    def test_quantity_of_one_is_valid(self):
        item = LineItem(product_id=ProductId.generate(), quantity=1)
        assert item.quantity == 1

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError):
            LineItem(product_id=ProductId.generate(), quantity=quantity)

    def test_boolean_quantity_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(product_id=ProductId.generate(), quantity=True)


class TestOrder:

    def test_create_assigns_identity_and_timestamp(self):
        items = [
            LineItem(product_id=ProductId.generate(), quantity=2),
            LineItem(product_id=ProductId.generate(), quantity=12),
        ]
        order = Order.create(_customer(), items)

        assert isinstance(order.id, OrderId)
        assert order.created_at.tzinfo is timezone.utc
        assert [item.quantity for item in order.line_items] == [2, 12]
        assert order.total_quantity == 14
        assert order.product_ids() == [item.product_id for item in items]

    def test_create_generates_distinct_ids(self):
        items = [LineItem(product_id=ProductId.generate(), quantity=1)]
        first = Order.create(_customer(), items)
        second = Order.create(_customer(), items)
        assert first.id != second.id

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one line item"):
            Order.create(_customer(), [])


class TestValueObjects:

    def test_product_id_parse_round_trips_string(self):
        raw = uuid4()
        assert ProductId.parse(str(raw)) == ProductId(value=raw)

    def test_product_id_parse_rejects_garbage(self):
        with pytest.raises(ValidationError):
            ProductId.parse("not-a-uuid")

    def test_ids_of_different_kinds_are_not_equal(self):
        raw = uuid4()
        assert ProductId(value=raw) != OrderId(value=raw)

    def test_money_coerces_to_decimal(self):
        money = Money(amount="19.99", currency="NZD")
        assert money.amount == Decimal("19.99")
        assert money * 3 == Money(amount=Decimal("59.97"), currency="NZD")

    def test_money_rejects_bad_currency(self):
        with pytest.raises(ValidationError):
            Money(amount=Decimal("1.00"), currency="DOLLARS")

    def test_product_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            Product.create(name="Refund", price=Money(amount=Decimal("-1.00")))

    def test_product_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            Product.create(name="", price=Money(amount=Decimal("1.00")))

    def test_product_rejects_sub_cent_price(self):
        with pytest.raises(ValidationError, match="2 decimal places"):
            Product.create(name="Beans", price=Money(amount=Decimal("18.505")))

    def test_product_price_is_normalised_to_cents(self):
        product = Product.create(name="Beans", price=Money(amount=Decimal("18.5"), currency="NZD"))
        assert str(product.price.amount) == "18.50"
        assert product.price.currency == "NZD"
