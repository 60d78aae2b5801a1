"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from inventory_costing.application.services import (
    get_composite_cost_aggregator,
    get_conversion_registry,
    get_receipt_processor,
    get_status_resolver,
    get_variance_analyzer,
    reset_services,
)
from inventory_costing.application.use_cases import (
    ComputeCompositeCostUseCase,
    ProcessMerchandiseReceiptUseCase,
)

__all__ = [
    # Use Cases
    "ComputeCompositeCostUseCase",
    "ProcessMerchandiseReceiptUseCase",
    # Service factories
    "get_conversion_registry",
    "get_composite_cost_aggregator",
    "get_receipt_processor",
    "get_status_resolver",
    "get_variance_analyzer",
    "reset_services",
]
