"""Inventory valuation entities produced by stock receipts."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VarianceImpact(str, Enum):
    """Effect of a price variance on the buyer's costs."""

    POSITIVE = "positive"  # paid less than quoted
    NEGATIVE = "negative"  # paid more than quoted
    NEUTRAL = "neutral"


class InventoryUpdate(BaseModel):
    """Stock and weighted average cost change caused by one received line."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    previous_stock: float
    added_quantity: float
    new_stock: float
    previous_unit_cost: float
    unit_cost: float
    cost_variance: float
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class PriceVarianceReport(BaseModel):
    """Ordered vs. received unit price for one received line."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str = ""
    ordered_price: float
    received_price: float
    variance: float
    variance_percentage: float
    impact: VarianceImpact


class ProductUpdate(BaseModel):
    """One record of a multi-record atomic product write.

    ``expected_version`` makes the write conditional: the store must reject it
    when the row changed since it was read.
    """

    product_id: str
    fields: dict[str, Any]
    expected_version: int | None = None
