"""Ingredient cost breakdown entities."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CostLineStatus(str, Enum):
    """How an ingredient line was priced."""

    PRICED = "priced"
    FALLBACK = "fallback"  # units assumed equivalent
    NO_PRICE = "no_price"
    MISSING_PRODUCT = "missing_product"
    INCOMPATIBLE_UNITS = "incompatible_units"
    CURRENCY_MISMATCH = "currency_mismatch"

    @property
    def needs_review(self) -> bool:
        return self != CostLineStatus.PRICED


class IngredientCostLine(BaseModel):
    """Cost contribution of one ingredient."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: float
    converted_quantity: float = 0.0
    cost: float = 0.0
    status: CostLineStatus = CostLineStatus.PRICED
    message: str | None = None


class CompositeCostBreakdown(BaseModel):
    """Per-ingredient costs and the resulting mixed product cost."""

    lines: list[IngredientCostLine]
    total_cost: float

    @property
    def flagged_lines(self) -> list[IngredientCostLine]:
        return [line for line in self.lines if line.status.needs_review]

    @property
    def used_fallback(self) -> bool:
        return any(line.status == CostLineStatus.FALLBACK for line in self.lines)
