"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UnitResponse(BaseModel):
    """A measurement unit and its conversion data."""

    unit: str = Field(..., description="Unit identifier")
    category: str = Field(..., description="weight, volume, count or other")
    factor: float = Field(..., description="Multiplier to the category's base unit")
    default_presentation_quantity: float = Field(
        ..., description="Suggested presentation quantity for new products"
    )


class ConversionResponse(BaseModel):
    """Result of a unit conversion."""

    value: float
    from_unit: str
    to_unit: str
    result: float
    category: str


class CostLineResponse(BaseModel):
    """Cost contribution of one ingredient."""

    product_id: str
    quantity: float
    converted_quantity: float
    cost: float
    status: str = Field(..., description="How the line was priced")
    message: str | None = None


class CompositeCostResponse(BaseModel):
    """Cost breakdown of a mixed product."""

    product_id: str | None = Field(default=None, description="Mixed product, when stored")
    total_cost: float = Field(..., description="Rounded unit cost of the mixed product")
    lines: list[CostLineResponse] = Field(default_factory=list)
    flagged_count: int = Field(default=0, description="Lines that need review")
    used_fallback: bool = False
    persisted: bool = False


class AvailabilityResponse(BaseModel):
    """Units that can be produced or sold from current stock."""

    product_id: str
    product_type: str
    available_units: int


class InventoryUpdateResponse(BaseModel):
    """Stock and cost change for one received line."""

    product_id: str
    previous_stock: float
    added_quantity: float
    new_stock: float
    previous_unit_cost: float
    unit_cost: float
    cost_variance: float
    updated_at: datetime


class PriceVarianceResponse(BaseModel):
    """Ordered vs. received unit price."""

    product_id: str
    product_name: str
    ordered_price: float
    received_price: float
    variance: float
    variance_percentage: float
    impact: str


class ReceivedItemResponse(BaseModel):
    """Received line as recorded on a receipt."""

    product_id: str
    product_name: str
    ordered_quantity: float
    received_quantity: float
    ordered_unit_price: float
    received_unit_price: float
    unit: str | None = None
    notes: str | None = None


class MerchandiseReceiptResponse(BaseModel):
    """Historical merchandise receipt."""

    id: str
    purchase_order_id: str
    supplier_id: str | None = None
    supplier_name: str = ""
    received_by: str | None = None
    received_at: datetime
    items: list[ReceivedItemResponse] = Field(default_factory=list)
    total_ordered_amount: float
    total_received_amount: float
    total_variance: float
    is_complete_delivery: bool
    notes: str | None = None


class MerchandiseReceiptListResponse(BaseModel):
    """List of merchandise receipts."""

    receipts: list[MerchandiseReceiptResponse]
    total: int


class ProcessReceiptResponse(BaseModel):
    """Outcome of receiving merchandise."""

    purchase_order_id: str
    new_order_status: str
    inventory_updates: list[InventoryUpdateResponse] = Field(default_factory=list)
    variance_reports: list[PriceVarianceResponse] = Field(default_factory=list)
    skipped_product_ids: list[str] = Field(default_factory=list)
    receipt: MerchandiseReceiptResponse


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. PRODUCT_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
