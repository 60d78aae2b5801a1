"""Abstract interface for product storage."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from inventory_costing.core.entities.inventory import ProductUpdate
from inventory_costing.core.entities.product import Product


class IProductStore(ABC):
    """Interface for product persistence."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Create a new product."""
        pass

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        pass

    @abstractmethod
    async def get_products(self, product_ids: Iterable[str]) -> dict[str, Product]:
        """Get several products keyed by ID; unknown IDs are absent from the result."""
        pass

    @abstractmethod
    async def list_products(self, limit: int = 100, offset: int = 0) -> list[Product]:
        """List products with pagination."""
        pass

    @abstractmethod
    async def apply_batch(self, updates: list[ProductUpdate]) -> None:
        """
        Apply all updates atomically.

        Either every update is written or none is. An update whose
        expected_version no longer matches raises StoreConflictError.
        """
        pass
