"""Application use cases."""

from inventory_costing.application.use_cases.compute_composite_cost import (
    AvailabilityResult,
    CompositeCostResult,
    ComputeCompositeCostUseCase,
)
from inventory_costing.application.use_cases.process_merchandise_receipt import (
    MerchandiseReceiptResult,
    ProcessMerchandiseReceiptUseCase,
)

__all__ = [
    "ComputeCompositeCostUseCase",
    "CompositeCostResult",
    "AvailabilityResult",
    "ProcessMerchandiseReceiptUseCase",
    "MerchandiseReceiptResult",
]
