"""Shared fixtures and sample data."""

from decimal import Decimal

import pytest

from myshop.application.dtos.order_dto import CreateOrderRequest, CustomerDTO, LineItemDTO
from myshop.domain.entities.product import Product
from myshop.domain.value_objects import Money


@pytest.fixture
def jon_doe() -> CustomerDTO:
    """Customer block used across order tests."""
    return CustomerDTO(
        name="Jon Doe",
        shipping_address="1 Queen St",
        city="Auckland",
        postal_code="1990",
        country="New Zealand",
    )


@pytest.fixture
def product_a() -> Product:
    return Product.create(name="Flat White Beans", price=Money(amount=Decimal("18.50"), currency="NZD"))


@pytest.fixture
def product_b() -> Product:
    return Product.create(name="Pour Over Filter", price=Money(amount=Decimal("4.00"), currency="NZD"))


@pytest.fixture
def make_order_request(jon_doe):
    """Build a CreateOrderRequest from (product, quantity) pairs."""

    def _make(*lines, customer=jon_doe) -> CreateOrderRequest:
        return CreateOrderRequest(
            customer=customer,
            line_items=[
                LineItemDTO(product_id=str(getattr(product, "id", product)), quantity=quantity)
                for product, quantity in lines
            ],
        )

    return _make
