"""SQLAlchemy implementation of ProductRepository."""

from myshop.domain.entities.product import Product
from myshop.domain.repositories.product_repository import ProductRepository

from ..mappers import ProductMapper
from ..models.product_model import ProductModel
from .base import SqlAlchemyRepositoryBase


class SqlAlchemyProductRepository(SqlAlchemyRepositoryBase[Product, ProductModel], ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    model = ProductModel

    def _to_domain(self, model: ProductModel) -> Product:
        return ProductMapper.to_domain(model)

    def _to_persistence(self, entity: Product) -> ProductModel:
        return ProductMapper.to_persistence(entity)
