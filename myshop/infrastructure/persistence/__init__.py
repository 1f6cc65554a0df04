from .in_memory import InMemoryOrderRepository, InMemoryProductRepository

__all__ = ["InMemoryOrderRepository", "InMemoryProductRepository"]
