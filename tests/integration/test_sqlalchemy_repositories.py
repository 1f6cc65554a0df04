"""Tests for SQLAlchemy repository implementations against SQLite."""

from datetime import timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from myshop.data.repositories import SqlAlchemyOrderRepository, SqlAlchemyProductRepository
from myshop.domain.entities import Customer, LineItem, Order, Product
from myshop.domain.exceptions import StorageError
from myshop.domain.value_objects import Money, OrderId, ProductId


def _order(*product_ids: ProductId, name: str = "Jon Doe") -> Order:
    customer = Customer(
        name=name,
        shipping_address="1 Queen St",
        city="Auckland",
        postal_code="1990",
        country="New Zealand",
    )
    return Order.create(
        customer, [LineItem(product_id=pid, quantity=i + 1) for i, pid in enumerate(product_ids)]
    )


@pytest.mark.asyncio
async def test_product_round_trip(test_session):
    repo = SqlAlchemyProductRepository(test_session)
    product = Product.create(name="Tea", price=Money(amount=Decimal("5.25"), currency="NZD"))

    await repo.add(product)
    loaded = await repo.get_by_id(product.id)

    assert loaded == product
    assert await repo.get_by_id(ProductId.generate()) is None


@pytest.mark.asyncio
async def test_order_round_trip_keeps_line_item_order(test_session_factory):
    product_ids = [ProductId.generate() for _ in range(3)]
    order = _order(*product_ids)

    async with test_session_factory() as session:
        await SqlAlchemyOrderRepository(session).add(order)

    async with test_session_factory() as session:
        loaded = await SqlAlchemyOrderRepository(session).get_by_id(order.id)

    assert loaded.id == order.id
    assert loaded.customer == order.customer
    assert loaded.line_items == order.line_items
    assert loaded.created_at == order.created_at
    assert loaded.created_at.tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_query_filters_in_insertion_order(test_session):
    repo = SqlAlchemyOrderRepository(test_session)
    first = _order(ProductId.generate())
    second = _order(ProductId.generate(), name="Jane Roe")
    third = _order(ProductId.generate())
    for order in (first, second, third):
        await repo.add(order)

    everything = [o.id async for o in repo.query()]
    jons = [o.id async for o in repo.query(lambda o: o.customer.name == "Jon Doe")]

    assert everything == [first.id, second.id, third.id]
    assert jons == [first.id, third.id]


@pytest.mark.asyncio
async def test_same_identity_twice_is_a_storage_error(test_session):
    repo = SqlAlchemyOrderRepository(test_session)
    order = _order(ProductId.generate())
    await repo.add(order)

    duplicate = Order(
        id=OrderId(value=order.id.value),
        customer=order.customer,
        line_items=order.line_items,
        created_at=order.created_at,
    )
    with pytest.raises(StorageError):
        await repo.add(duplicate)

    # Session is usable again after the rollback
    assert await repo.get_by_id(order.id) is not None


@pytest.mark.asyncio
async def test_driver_failure_is_wrapped_and_rolled_back(test_session):
    repo = SqlAlchemyProductRepository(test_session)
    test_session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))
    test_session.rollback = AsyncMock()

    with pytest.raises(StorageError) as exc_info:
        await repo.get_by_id(ProductId.generate())

    assert isinstance(exc_info.value.__cause__, OperationalError)
    test_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_query_rolls_back_session(test_session):
    repo = SqlAlchemyOrderRepository(test_session)
    test_session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))
    test_session.rollback = AsyncMock()

    with pytest.raises(StorageError):
        [order async for order in repo.query()]

    test_session.rollback.assert_awaited_once()
