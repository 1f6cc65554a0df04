"""Application service for Order operations."""

import logging
from typing import List, Optional

from myshop.application.dtos.order_dto import (
    CreateOrderRequest,
    CustomerDTO,
    LineItemDTO,
    OrderDTO,
)
from myshop.domain.entities.order import Customer, LineItem, Order
from myshop.domain.exceptions import ProductNotFound, ValidationError
from myshop.domain.repositories import OrderRepository, ProductRepository
from myshop.domain.value_objects import OrderId, ProductId

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for the order creation workflow.

    Responsibilities:
    - Validate the incoming request against domain rules
    - Resolve every referenced product before anything is written
    - Persist the new Order with a single repository call
    - Transform between DTOs and domain entities

    Product lookups and the order write are separate repository calls with
    no shared transaction. A product removed between validation and the
    write is an accepted inconsistency.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
    ) -> None:
        """Initialize order application service.

        Args:
            order_repository: Order persistence port
            product_repository: Product persistence port
        """
        self._orders = order_repository
        self._products = product_repository

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with created order details

        Raises:
            ValidationError: If the request is malformed
            ProductNotFound: If a line item references an unknown product
            StorageError: If the order store fails
        """
        # 1. Transform DTO to domain values (validates)
        customer = self._dto_to_customer(request.customer)
        line_items = self._dto_to_line_items(request.line_items)

        # 2. Every product reference must resolve
        for dto, item in zip(request.line_items, line_items):
            product = await self._products.get_by_id(item.product_id)
            if product is None:
                logger.warning(f"Order rejected: unknown product {dto.product_id}")
                raise ProductNotFound(dto.product_id)

        # 3. Build aggregate
        order = Order.create(customer, line_items)

        # 4. Persist via repository (single write, StorageError propagates)
        await self._orders.add(order)

        logger.info(
            f"Order created: {order.id} "
            f"({len(order.line_items)} line item(s), {order.total_quantity} unit(s))"
        )
        return self._order_to_dto(order)

    async def get_order(self, order_id: str) -> Optional[OrderDTO]:
        """Get order by ID.

        Args:
            order_id: Order ID string

        Returns:
            OrderDTO if found, None otherwise (including malformed IDs)
        """
        try:
            oid = OrderId.parse(order_id)
        except ValidationError:
            return None

        order = await self._orders.get_by_id(oid)
        if order is None:
            return None
        return self._order_to_dto(order)

    async def list_orders(
        self, limit: int = 100, customer_name: Optional[str] = None
    ) -> List[OrderDTO]:
        """List orders, optionally filtered by exact customer name.

        Args:
            limit: Maximum number of orders to return
            customer_name: Only orders placed by this customer

        Returns:
            List of OrderDTO instances
        """
        predicate = None
        if customer_name is not None:
            predicate = lambda order: order.customer.name == customer_name  # noqa: E731

        orders: List[OrderDTO] = []
        async for order in self._orders.query(predicate):
            if len(orders) >= limit:
                break
            orders.append(self._order_to_dto(order))
        return orders

    def _dto_to_customer(self, dto: Optional[CustomerDTO]) -> Customer:
        if dto is None:
            raise ValidationError("Customer details are required")
        return Customer(
            name=dto.name,
            shipping_address=dto.shipping_address,
            city=dto.city,
            postal_code=dto.postal_code,
            country=dto.country,
        )

    def _dto_to_line_items(self, items: List[LineItemDTO]) -> List[LineItem]:
        if not items:
            raise ValidationError("An order must contain at least one line item")
        return [
            LineItem(product_id=ProductId.parse(item.product_id), quantity=item.quantity)
            for item in items
        ]

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO."""
        return OrderDTO(
            id=str(order.id),
            customer=CustomerDTO(
                name=order.customer.name,
                shipping_address=order.customer.shipping_address,
                city=order.customer.city,
                postal_code=order.customer.postal_code,
                country=order.customer.country,
            ),
            line_items=[
                LineItemDTO(product_id=str(item.product_id), quantity=item.quantity)
                for item in order.line_items
            ],
            created_at=order.created_at,
        )
