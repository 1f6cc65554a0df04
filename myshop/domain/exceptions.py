"""Domain exceptions for the order workflow."""


class DomainError(Exception):
    """Base class for all MyShop domain errors."""


class ValidationError(DomainError):
    """Raised when a request or entity violates a domain rule."""


class ProductNotFound(DomainError):
    """Raised when a line item references a product that does not exist.

    ``product_id`` is the reference exactly as the caller supplied it.
    """

    def __init__(self, product_id) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class StorageError(DomainError):
    """Raised when the backing store fails to persist or query."""
