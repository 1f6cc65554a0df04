"""Product catalogue endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from myshop.application.dtos.product_dto import CreateProductRequest, ProductDTO
from myshop.application.services.product_service import ProductApplicationService

from myshop_web.deps import get_product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductDTO, status_code=201)
async def create_product(
    request: CreateProductRequest,
    service: ProductApplicationService = Depends(get_product_service),
) -> ProductDTO:
    return await service.create_product(request)


@router.get("/{product_id}", response_model=ProductDTO)
async def get_product(
    product_id: str,
    service: ProductApplicationService = Depends(get_product_service),
) -> ProductDTO:
    product = await service.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


@router.get("", response_model=List[ProductDTO])
async def list_products(
    limit: int = Query(default=100, ge=1, le=1000),
    service: ProductApplicationService = Depends(get_product_service),
) -> List[ProductDTO]:
    return await service.list_products(limit=limit)
