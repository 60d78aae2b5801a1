"""Tests for purchasing entities."""

import pytest
from pydantic import ValidationError

from inventory_costing.core.entities.purchasing import (
    MerchandiseReceipt,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
    ReceivedItem,
)


class TestPurchaseOrderStatus:
    @pytest.mark.parametrize(
        ("status", "terminal"),
        [
            (PurchaseOrderStatus.PENDING, False),
            (PurchaseOrderStatus.APPROVED, False),
            (PurchaseOrderStatus.PARTIALLY_RECEIVED, False),
            (PurchaseOrderStatus.RECEIVED, True),
            (PurchaseOrderStatus.CANCELED, True),
        ],
    )
    def test_is_terminal(self, status, terminal):
        assert status.is_terminal is terminal


class TestPurchaseOrder:
    def test_total_amount(self):
        order = PurchaseOrder(
            id="PO-1",
            items=[
                PurchaseOrderItem(product_id="a", quantity=2, unit_price=3.0),
                PurchaseOrderItem(product_id="b", quantity=1, unit_price=4.5),
            ],
        )
        assert order.total_amount == pytest.approx(10.5)
        assert order.status == PurchaseOrderStatus.PENDING


class TestReceivedItem:
    def test_amounts(self):
        item = ReceivedItem(
            product_id="a",
            ordered_quantity=10,
            received_quantity=8,
            ordered_unit_price=2.0,
            received_unit_price=2.5,
        )
        assert item.ordered_amount == 20.0
        assert item.received_amount == 20.0
        assert item.is_partial_delivery

    def test_nothing_received_is_not_partial(self):
        item = ReceivedItem(
            product_id="a",
            ordered_quantity=10,
            received_quantity=0,
            ordered_unit_price=2.0,
            received_unit_price=2.0,
        )
        assert not item.is_partial_delivery

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            ReceivedItem(
                product_id="a",
                ordered_quantity=10,
                received_quantity=-1,
                ordered_unit_price=2.0,
                received_unit_price=2.0,
            )


class TestMerchandiseReceipt:
    def test_defaults(self):
        receipt = MerchandiseReceipt(purchase_order_id="PO-1")
        assert receipt.id is None
        assert receipt.items == []
        assert receipt.total_variance == 0.0
        assert receipt.is_complete_delivery is False
