"""
Purchase order status resolution.

Derives the fulfillment status of an order from the ordered and received
quantities of a merchandise receipt.
"""

from collections.abc import Sequence

from inventory_costing.core.entities.purchasing import PurchaseOrderStatus, ReceivedItem
from inventory_costing.core.exceptions import PurchaseOrderClosedError


class PurchaseOrderStatusResolver:
    """
    Pure status resolution over received lines.

    - every line received >= ordered            -> RECEIVED
    - any line with 0 < received < ordered       -> PARTIALLY_RECEIVED
    - otherwise (nothing arrived)                -> None, status unchanged

    Over-delivery counts as a fulfilled line.
    """

    def resolve(self, items: Sequence[ReceivedItem]) -> PurchaseOrderStatus | None:
        if all(item.received_quantity >= item.ordered_quantity for item in items):
            return PurchaseOrderStatus.RECEIVED
        if any(item.is_partial_delivery for item in items):
            return PurchaseOrderStatus.PARTIALLY_RECEIVED
        return None

    def transition(
        self,
        current: PurchaseOrderStatus,
        items: Sequence[ReceivedItem],
        order_id: str = "",
    ) -> PurchaseOrderStatus:
        """
        Next status of an order after receiving items.

        Raises:
            PurchaseOrderClosedError: If the order is already received or canceled
        """
        if current.is_terminal:
            raise PurchaseOrderClosedError(order_id, current.value)
        return self.resolve(items) or current
