"""SQLite storage implementations."""

from inventory_costing.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    storage_errors,
)
from inventory_costing.infrastructure.storage.sqlite.product_store import SQLiteProductStore
from inventory_costing.infrastructure.storage.sqlite.purchase_order_store import (
    SQLitePurchaseOrderStore,
)

# Aliases used by the application lifespan
get_connection_pool = get_pool
close_connection_pool = close_pool

# Singleton instances
_product_store: SQLiteProductStore | None = None
_purchase_order_store: SQLitePurchaseOrderStore | None = None


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_purchase_order_store() -> SQLitePurchaseOrderStore:
    """Get singleton purchase order store instance."""
    global _purchase_order_store
    if _purchase_order_store is None:
        _purchase_order_store = SQLitePurchaseOrderStore()
    return _purchase_order_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "storage_errors",
    "get_connection_pool",
    "close_connection_pool",
    # Store classes
    "SQLiteProductStore",
    "SQLitePurchaseOrderStore",
    # Factory functions
    "get_product_store",
    "get_purchase_order_store",
]
