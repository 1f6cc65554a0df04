"""Application service for the product catalogue."""

import logging
from typing import List, Optional

from myshop.application.dtos.product_dto import CreateProductRequest, ProductDTO
from myshop.domain.entities.product import Product
from myshop.domain.exceptions import ValidationError
from myshop.domain.repositories import ProductRepository
from myshop.domain.value_objects import Money, ProductId

logger = logging.getLogger(__name__)


class ProductApplicationService:
    """Create and read catalogue products."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self._products = product_repository

    async def create_product(self, request: CreateProductRequest) -> ProductDTO:
        """Create a new product.

        Raises:
            ValidationError: If name, price or currency is invalid
            StorageError: If the product store fails
        """
        product = Product.create(
            name=request.name,
            price=Money(amount=request.price_amount, currency=request.price_currency),
        )
        await self._products.add(product)
        logger.info(f"Product created: {product.id} ({product.name})")
        return self._product_to_dto(product)

    async def get_product(self, product_id: str) -> Optional[ProductDTO]:
        try:
            pid = ProductId.parse(product_id)
        except ValidationError:
            return None

        product = await self._products.get_by_id(pid)
        return self._product_to_dto(product) if product else None

    async def list_products(self, limit: int = 100) -> List[ProductDTO]:
        products: List[ProductDTO] = []
        async for product in self._products.query():
            if len(products) >= limit:
                break
            products.append(self._product_to_dto(product))
        return products

    @staticmethod
    def _product_to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=product.name,
            price_amount=product.price.amount,
            price_currency=product.price.currency,
        )
