"""Core interfaces (ports) for dependency injection."""

from inventory_costing.core.interfaces.product_store import IProductStore
from inventory_costing.core.interfaces.purchase_order_store import IPurchaseOrderStore

__all__ = [
    "IProductStore",
    "IPurchaseOrderStore",
]
