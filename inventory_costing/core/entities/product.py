"""Product catalog entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

from inventory_costing.core.entities.units import Unit


class ProductType(str, Enum):
    """Base products carry their own price, mixed products derive cost."""

    BASE = "base"
    MIXED = "mixed"


class Ingredient(BaseModel):
    """One line of a mixed product's recipe."""

    product_id: str  # base product reference
    quantity: float = Field(..., gt=0)
    unit: Unit | None = None
    waste_percentage: float = Field(default=0.0, ge=0)

    @property
    def waste_multiplier(self) -> float:
        return 1 + self.waste_percentage / 100


class Product(BaseModel):
    """Catalog product as seen by the costing engine."""

    id: str
    name: str = ""
    type: ProductType = ProductType.BASE
    price: float | None = Field(default=None, ge=0)
    cost: float | None = None  # computed for mixed products
    unit_cost: float = Field(default=0.0, ge=0)  # weighted average
    currency: str = "USD"
    presentation: Unit | None = None
    presentation_quantity: float = Field(default=1.0, ge=1)
    stock: float = Field(default=0.0, ge=0)
    ingredients: list[Ingredient] = Field(default_factory=list)
    version: int = 0  # optimistic concurrency token
    last_receipt_id: str | None = None
    last_received_at: datetime | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_mixed(self) -> bool:
        return self.type == ProductType.MIXED

    @property
    def inventory_value(self) -> float:
        """Stock valued at the weighted average unit cost."""
        return self.stock * self.unit_cost
