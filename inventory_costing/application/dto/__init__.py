"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from inventory_costing.application.dto.requests import (
    CompositeCostRequest,
    ConvertUnitRequest,
    IngredientRequest,
    ProcessReceiptRequest,
    RecalculateCostRequest,
    ReceivedItemRequest,
)
from inventory_costing.application.dto.responses import (
    AvailabilityResponse,
    CompositeCostResponse,
    ConversionResponse,
    CostLineResponse,
    ErrorResponse,
    HealthResponse,
    InventoryUpdateResponse,
    MerchandiseReceiptListResponse,
    MerchandiseReceiptResponse,
    PriceVarianceResponse,
    ProcessReceiptResponse,
    ReceivedItemResponse,
    UnitResponse,
)

__all__ = [
    # Requests
    "ConvertUnitRequest",
    "IngredientRequest",
    "CompositeCostRequest",
    "RecalculateCostRequest",
    "ReceivedItemRequest",
    "ProcessReceiptRequest",
    # Responses
    "UnitResponse",
    "ConversionResponse",
    "CostLineResponse",
    "CompositeCostResponse",
    "AvailabilityResponse",
    "InventoryUpdateResponse",
    "PriceVarianceResponse",
    "ReceivedItemResponse",
    "MerchandiseReceiptResponse",
    "MerchandiseReceiptListResponse",
    "ProcessReceiptResponse",
    "HealthResponse",
    "ErrorResponse",
]
