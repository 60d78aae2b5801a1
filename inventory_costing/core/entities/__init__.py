"""Core domain entities."""

from inventory_costing.core.entities.costing import (
    CompositeCostBreakdown,
    CostLineStatus,
    IngredientCostLine,
)
from inventory_costing.core.entities.inventory import (
    InventoryUpdate,
    PriceVarianceReport,
    ProductUpdate,
    VarianceImpact,
)
from inventory_costing.core.entities.product import Ingredient, Product, ProductType
from inventory_costing.core.entities.purchasing import (
    MerchandiseReceipt,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
    ReceivedItem,
)
from inventory_costing.core.entities.units import (
    CONVERSION_FACTORS,
    UNIT_CATEGORIES,
    Unit,
    UnitCategory,
    default_presentation_quantity,
)

__all__ = [
    # Units
    "Unit",
    "UnitCategory",
    "UNIT_CATEGORIES",
    "CONVERSION_FACTORS",
    "default_presentation_quantity",
    # Products
    "Product",
    "ProductType",
    "Ingredient",
    # Costing
    "CostLineStatus",
    "IngredientCostLine",
    "CompositeCostBreakdown",
    # Inventory
    "InventoryUpdate",
    "PriceVarianceReport",
    "ProductUpdate",
    "VarianceImpact",
    # Purchasing
    "PurchaseOrder",
    "PurchaseOrderItem",
    "PurchaseOrderStatus",
    "ReceivedItem",
    "MerchandiseReceipt",
]
