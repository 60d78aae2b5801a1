"""
Service factory functions for dependency injection.

This module wires settings into the core services. Use cases and API
handlers obtain their services from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from inventory_costing.config import get_settings
from inventory_costing.core.services import (
    CompositeProductCostAggregator,
    IngredientCostCalculator,
    InventoryReceiptProcessor,
    PriceVarianceAnalyzer,
    PurchaseOrderStatusResolver,
    UnitConversionRegistry,
    get_unit_registry,
)

# Singleton service instances
_composite_cost_aggregator: CompositeProductCostAggregator | None = None
_receipt_processor: InventoryReceiptProcessor | None = None
_status_resolver: PurchaseOrderStatusResolver | None = None
_variance_analyzer: PriceVarianceAnalyzer | None = None


def get_conversion_registry() -> UnitConversionRegistry:
    """Get the process-wide unit conversion registry."""
    return get_unit_registry()


def get_composite_cost_aggregator() -> CompositeProductCostAggregator:
    """
    Get or create the composite cost aggregator.

    Unit fallback and strict-units policies come from COSTING_* settings.
    """
    global _composite_cost_aggregator

    if _composite_cost_aggregator is None:
        settings = get_settings()
        calculator = IngredientCostCalculator(
            registry=get_unit_registry(),
            allow_unit_fallback=settings.costing.allow_unit_fallback,
        )
        _composite_cost_aggregator = CompositeProductCostAggregator(
            calculator=calculator,
            strict_units=settings.costing.strict_units,
        )
    return _composite_cost_aggregator


def get_receipt_processor() -> InventoryReceiptProcessor:
    """Get or create the inventory receipt processor with RECEIPT_* retry settings."""
    global _receipt_processor

    if _receipt_processor is None:
        settings = get_settings()
        _receipt_processor = InventoryReceiptProcessor(
            max_attempts=settings.receipts.max_conflict_retries,
            retry_delay=settings.receipts.retry_delay,
            retry_max_delay=settings.receipts.retry_max_delay,
        )
    return _receipt_processor


def get_status_resolver() -> PurchaseOrderStatusResolver:
    """Get or create the purchase order status resolver."""
    global _status_resolver

    if _status_resolver is None:
        _status_resolver = PurchaseOrderStatusResolver()
    return _status_resolver


def get_variance_analyzer() -> PriceVarianceAnalyzer:
    """Get or create the price variance analyzer."""
    global _variance_analyzer

    if _variance_analyzer is None:
        _variance_analyzer = PriceVarianceAnalyzer()
    return _variance_analyzer


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _composite_cost_aggregator
    global _receipt_processor
    global _status_resolver
    global _variance_analyzer

    _composite_cost_aggregator = None
    _receipt_processor = None
    _status_resolver = None
    _variance_analyzer = None


__all__ = [
    "get_conversion_registry",
    "get_composite_cost_aggregator",
    "get_receipt_processor",
    "get_status_resolver",
    "get_variance_analyzer",
    "reset_services",
]
