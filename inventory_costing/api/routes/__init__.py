"""API route modules."""

from inventory_costing.api.routes.costing import router as costing_router
from inventory_costing.api.routes.health import router as health_router
from inventory_costing.api.routes.receipts import router as receipts_router
from inventory_costing.api.routes.units import router as units_router

__all__ = [
    "health_router",
    "units_router",
    "costing_router",
    "receipts_router",
]
