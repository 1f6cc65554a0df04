"""Order endpoints for REST API."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from myshop.application.dtos.order_dto import CreateOrderRequest, OrderDTO
from myshop.application.services.order_service import OrderApplicationService

from myshop_web.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Create a new order.

    Domain errors are translated by the application exception handlers:
    ValidationError → 400, ProductNotFound → 422, StorageError → 500.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderDTO with created order details
    """
    return await service.create_order(request)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Raises:
        HTTPException: If order not found
    """
    order = await service.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders"),
    customer_name: Optional[str] = Query(
        default=None, alias="customerName", description="Filter by customer name"
    ),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List orders with pagination."""
    return await service.list_orders(limit=limit, customer_name=customer_name)
