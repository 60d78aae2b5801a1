"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import BaseModel, Field

from inventory_costing.core.entities.units import Unit


class ConvertUnitRequest(BaseModel):
    """Request to convert a quantity between two units."""

    value: float = Field(..., description="Quantity to convert", examples=[1.5])
    from_unit: Unit = Field(..., description="Source unit", examples=["kilogram"])
    to_unit: Unit = Field(..., description="Target unit", examples=["gram"])


class IngredientRequest(BaseModel):
    """One ingredient line of a recipe."""

    product_id: str = Field(..., description="Base product ID")
    quantity: float = Field(..., gt=0, description="Quantity used per unit produced")
    unit: Unit | None = Field(
        default=None,
        description="Unit of the quantity; missing units fall back to presentation units",
    )
    waste_percentage: float = Field(default=0.0, ge=0, description="Expected waste, in percent")


class CompositeCostRequest(BaseModel):
    """Request to cost an ingredient list without persisting anything."""

    ingredients: list[IngredientRequest] = Field(..., description="Recipe lines")
    currency: str | None = Field(
        default=None,
        description="Currency every base product must be priced in",
        examples=["USD"],
    )


class RecalculateCostRequest(BaseModel):
    """Request to recompute a stored mixed product's cost."""

    persist: bool = Field(
        default=True,
        description="Write the rounded cost back to the product",
    )


class ReceivedItemRequest(BaseModel):
    """One received line of a merchandise receipt."""

    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(default="", description="Product name at time of receipt")
    ordered_quantity: float = Field(..., ge=0, description="Quantity on the purchase order")
    received_quantity: float = Field(..., ge=0, description="Quantity actually delivered")
    ordered_unit_price: float = Field(..., ge=0, description="Quoted price per unit")
    received_unit_price: float = Field(..., ge=0, description="Invoiced price per unit")
    unit: str | None = Field(default=None, description="Unit of measure")
    notes: str | None = Field(default=None, description="Line notes")


class ProcessReceiptRequest(BaseModel):
    """Request to receive merchandise against a purchase order."""

    items: list[ReceivedItemRequest] = Field(..., description="Received lines")
    received_by: str | None = Field(default=None, description="User receiving the goods")
    notes: str | None = Field(default=None, description="Receipt notes")
