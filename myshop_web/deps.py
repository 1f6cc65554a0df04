"""FastAPI dependencies for dependency injection."""

import logging
from pathlib import Path
from typing import AsyncGenerator, NamedTuple, Optional

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from myshop.application.services import OrderApplicationService, ProductApplicationService  # noqa: E402
from myshop.data.repositories import SqlAlchemyOrderRepository, SqlAlchemyProductRepository  # noqa: E402
from myshop.domain.repositories import OrderRepository, ProductRepository  # noqa: E402
from myshop.infrastructure.database import get_session_factory  # noqa: E402
from myshop.infrastructure.persistence import (  # noqa: E402
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from myshop.settings import get_app_settings  # noqa: E402

logger = logging.getLogger(__name__)


class Repositories(NamedTuple):
    """Repository instances bound for one request."""

    orders: OrderRepository
    products: ProductRepository


# =============================================================================
# SINGLETON INSTANCES (memory backend)
# =============================================================================

_memory_repositories: Optional[Repositories] = None


def _get_memory_repositories() -> Repositories:
    global _memory_repositories
    if _memory_repositories is None:
        _memory_repositories = Repositories(
            orders=InMemoryOrderRepository(),
            products=InMemoryProductRepository(),
        )
        logger.info("Created in-memory repositories")
    return _memory_repositories


# =============================================================================
# DEPENDENCIES
# =============================================================================

async def get_repositories() -> AsyncGenerator[Repositories, None]:
    """Get repositories for the configured backend.

    The SQLAlchemy backend opens one session per request.

    Yields:
        Repositories instance
    """
    if get_app_settings().repository_backend == "memory":
        yield _get_memory_repositories()
        return

    async with get_session_factory()() as session:
        yield Repositories(
            orders=SqlAlchemyOrderRepository(session),
            products=SqlAlchemyProductRepository(session),
        )


def get_order_service(
    repositories: Repositories = Depends(get_repositories),
) -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(
        order_repository=repositories.orders,
        product_repository=repositories.products,
    )


def get_product_service(
    repositories: Repositories = Depends(get_repositories),
) -> ProductApplicationService:
    """Get ProductApplicationService instance.

    Returns:
        ProductApplicationService instance
    """
    return ProductApplicationService(product_repository=repositories.products)


def reset_dependencies() -> None:
    """Drop singleton instances (for testing)."""
    global _memory_repositories
    _memory_repositories = None
    logger.info("Dependencies reset")
