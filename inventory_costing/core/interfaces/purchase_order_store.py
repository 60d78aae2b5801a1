"""Abstract interface for purchase order and receipt storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from inventory_costing.core.entities.inventory import ProductUpdate
from inventory_costing.core.entities.purchasing import (
    MerchandiseReceipt,
    PurchaseOrder,
    PurchaseOrderStatus,
)


class IPurchaseOrderStore(ABC):
    """Interface for purchase order and merchandise receipt persistence."""

    @abstractmethod
    async def create_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Create a purchase order."""
        pass

    @abstractmethod
    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        """Get purchase order by ID."""
        pass

    @abstractmethod
    async def set_status(
        self,
        order_id: str,
        status: PurchaseOrderStatus,
        received_at: datetime | None = None,
    ) -> None:
        """Set the lifecycle status of an order."""
        pass

    @abstractmethod
    async def create_receipt(self, receipt: MerchandiseReceipt) -> MerchandiseReceipt:
        """Record a merchandise receipt."""
        pass

    @abstractmethod
    async def record_receipt(
        self,
        receipt: MerchandiseReceipt,
        product_updates: list[ProductUpdate],
        status: PurchaseOrderStatus | None = None,
        received_at: datetime | None = None,
    ) -> MerchandiseReceipt:
        """
        Atomically apply product updates, set the order status and record the receipt.

        Raises:
            StoreConflictError: A versioned product update lost a race; nothing is written
        """
        pass

    @abstractmethod
    async def list_receipts_by_order(self, order_id: str) -> list[MerchandiseReceipt]:
        """Receipts for one order, newest first."""
        pass

    @abstractmethod
    async def list_receipts(self, limit: int = 100, offset: int = 0) -> list[MerchandiseReceipt]:
        """All receipts, newest first."""
        pass
