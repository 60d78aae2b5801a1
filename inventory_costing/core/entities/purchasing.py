"""Purchase order and merchandise receipt entities."""

from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class PurchaseOrderStatus(str, Enum):
    """Purchase order lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    RECEIVED = "received"
    PARTIALLY_RECEIVED = "partially_received"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (PurchaseOrderStatus.RECEIVED, PurchaseOrderStatus.CANCELED)


class PurchaseOrderItem(BaseModel):
    """A line of a purchase order as placed with the supplier."""

    product_id: str
    product_name: str = ""
    quantity: float = Field(..., ge=0)
    unit_price: float = Field(..., ge=0)

    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


class PurchaseOrder(BaseModel):
    """Purchase order placed with a supplier."""

    id: str
    supplier_id: str | None = None
    supplier_name: str = ""
    currency: str = "USD"
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING
    items: list[PurchaseOrderItem] = Field(default_factory=list)
    expected_delivery_date: date | None = None
    received_at: datetime | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def total_amount(self) -> float:
        return sum(item.total for item in self.items)


class ReceivedItem(BaseModel):
    """One line of a merchandise receipt."""

    product_id: str
    product_name: str = ""  # copied for history
    ordered_quantity: float = Field(..., ge=0)
    received_quantity: float = Field(..., ge=0)
    ordered_unit_price: float = Field(..., ge=0)
    received_unit_price: float = Field(..., ge=0)
    unit: str | None = None
    notes: str | None = None

    @property
    def is_partial_delivery(self) -> bool:
        return 0 < self.received_quantity < self.ordered_quantity

    @property
    def ordered_amount(self) -> float:
        return self.ordered_quantity * self.ordered_unit_price

    @property
    def received_amount(self) -> float:
        return self.received_quantity * self.received_unit_price


class MerchandiseReceipt(BaseModel):
    """Historical record of goods received against a purchase order."""

    id: str | None = None
    purchase_order_id: str
    supplier_id: str | None = None
    supplier_name: str = ""
    received_by: str | None = None
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    items: list[ReceivedItem] = Field(default_factory=list)
    total_ordered_amount: float = 0.0
    total_received_amount: float = 0.0
    total_variance: float = 0.0
    is_complete_delivery: bool = False
    notes: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
