"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from inventory_costing.application.services import get_conversion_registry
from inventory_costing.application.use_cases import (
    ComputeCompositeCostUseCase,
    ProcessMerchandiseReceiptUseCase,
)
from inventory_costing.config import Settings, get_settings
from inventory_costing.core.services import UnitConversionRegistry
from inventory_costing.infrastructure.storage.sqlite import (
    SQLitePurchaseOrderStore,
    get_purchase_order_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
def get_registry() -> UnitConversionRegistry:
    """Get unit conversion registry."""
    return get_conversion_registry()


# Store dependencies
async def get_po_store() -> SQLitePurchaseOrderStore:
    """Get purchase order store."""
    return await get_purchase_order_store()


# Use case dependencies
def get_compute_composite_cost_use_case() -> ComputeCompositeCostUseCase:
    """Get composite cost use case."""
    return ComputeCompositeCostUseCase()


def get_process_receipt_use_case() -> ProcessMerchandiseReceiptUseCase:
    """Get merchandise receipt use case."""
    return ProcessMerchandiseReceiptUseCase()
