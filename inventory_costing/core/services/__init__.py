"""
Core business logic services.

Layer-pure services that depend only on:
- inventory_costing/core/entities/*
- inventory_costing/core/interfaces/*
- inventory_costing/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from inventory_costing.core.services.ingredient_costing import (
    CompositeProductCostAggregator,
    IngredientCostCalculator,
    compute_composite_product_cost,
    index_catalog,
)
from inventory_costing.core.services.price_variance import PriceVarianceAnalyzer, ReceiptTotals
from inventory_costing.core.services.purchase_order_status import PurchaseOrderStatusResolver
from inventory_costing.core.services.receipt_processor import (
    InventoryReceiptProcessor,
    ReceiptComputation,
    weighted_average_cost,
)
from inventory_costing.core.services.unit_conversion import (
    UnitConversionRegistry,
    get_unit_registry,
)

__all__ = [
    # Units
    "UnitConversionRegistry",
    "get_unit_registry",
    # Costing
    "IngredientCostCalculator",
    "CompositeProductCostAggregator",
    "compute_composite_product_cost",
    "index_catalog",
    # Receipts
    "InventoryReceiptProcessor",
    "ReceiptComputation",
    "weighted_average_cost",
    # Purchase orders
    "PurchaseOrderStatusResolver",
    # Variance
    "PriceVarianceAnalyzer",
    "ReceiptTotals",
]
