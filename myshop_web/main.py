"""
MyShop - Main FastAPI Application.

REST API layer for order creation and the product catalogue.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from myshop import __version__
from myshop.domain.exceptions import ProductNotFound, StorageError, ValidationError
from myshop.infrastructure.database import close_database, init_database
from myshop.infrastructure.logging import configure_logging
from myshop.settings import get_app_settings
from myshop_web.v1.endpoints import orders, products

settings = get_app_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise the database on startup and dispose it on shutdown."""
    logger.info(f"🚀 {settings.app_name} starting up (backend: {settings.repository_backend})")
    if settings.repository_backend == "sqlalchemy":
        await init_database(settings.database)
    yield
    await close_database()
    logger.info(f"👋 {settings.app_name} shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="MyShop order creation and product catalogue API",
    version=__version__,
    lifespan=lifespan,
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Malformed order or product request → 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(ProductNotFound)
async def product_not_found_handler(request: Request, exc: ProductNotFound) -> JSONResponse:
    """Line item references an unknown product → 422 naming the product."""
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "productId": str(exc.product_id)},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Backing store failure → 500."""
    logger.error(f"Storage failure on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(orders.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
