"""Tests for merchandise receipt endpoints."""

from unittest.mock import AsyncMock

import pytest

from inventory_costing.api.dependencies import get_po_store, get_process_receipt_use_case
from inventory_costing.application.use_cases import ProcessMerchandiseReceiptUseCase
from inventory_costing.core.entities import MerchandiseReceipt, PurchaseOrderStatus
from inventory_costing.core.exceptions import StoreUnavailableError
from inventory_costing.core.interfaces import IProductStore, IPurchaseOrderStore
from inventory_costing.core.services import (
    InventoryReceiptProcessor,
    PriceVarianceAnalyzer,
    PurchaseOrderStatusResolver,
)


@pytest.fixture
def product_store(flour, milk):
    store = AsyncMock(spec=IProductStore)
    store.get_products.return_value = {flour.id: flour, milk.id: milk}
    return store


@pytest.fixture
def po_store(purchase_order):
    store = AsyncMock(spec=IPurchaseOrderStore)
    store.get_order.return_value = purchase_order
    store.record_receipt.side_effect = lambda receipt, updates, **kwargs: receipt
    return store


@pytest.fixture(autouse=True)
def _override_dependencies(app, product_store, po_store):
    use_case = ProcessMerchandiseReceiptUseCase(
        product_store=product_store,
        purchase_order_store=po_store,
        processor=InventoryReceiptProcessor(retry_delay=0),
        status_resolver=PurchaseOrderStatusResolver(),
        variance_analyzer=PriceVarianceAnalyzer(),
    )
    app.dependency_overrides[get_process_receipt_use_case] = lambda: use_case
    app.dependency_overrides[get_po_store] = lambda: po_store


@pytest.fixture
def payload(received_items) -> dict:
    return {
        "items": [item.model_dump() for item in received_items],
        "received_by": "alice",
    }


class TestReceiveMerchandise:
    async def test_complete_delivery(self, async_client, payload):
        response = await async_client.post("/api/purchase-orders/PO-001/receipts", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["new_order_status"] == "received"
        assert data["receipt"]["is_complete_delivery"] is True
        assert data["receipt"]["received_by"] == "alice"
        assert data["receipt"]["total_variance"] == pytest.approx(3.0)
        assert {r["product_id"]: r["impact"] for r in data["variance_reports"]} == {
            "flour": "negative",
            "milk": "positive",
        }
        assert [u["new_stock"] for u in data["inventory_updates"]] == [5010, 15]

    async def test_order_not_found(self, async_client, po_store, payload):
        po_store.get_order.return_value = None

        response = await async_client.post("/api/purchase-orders/PO-404/receipts", json=payload)

        assert response.status_code == 404
        assert response.json()["error_code"] == "PURCHASE_ORDER_NOT_FOUND"

    async def test_closed_order(self, async_client, purchase_order, payload):
        purchase_order.status = PurchaseOrderStatus.CANCELED

        response = await async_client.post("/api/purchase-orders/PO-001/receipts", json=payload)

        assert response.status_code == 409
        assert response.json()["error_code"] == "PURCHASE_ORDER_CLOSED"

    async def test_store_unavailable(self, async_client, po_store, payload):
        po_store.record_receipt.side_effect = StoreUnavailableError("record_receipt", "locked")

        response = await async_client.post("/api/purchase-orders/PO-001/receipts", json=payload)

        assert response.status_code == 503
        assert response.json()["error_code"] == "STORE_UNAVAILABLE"

    async def test_negative_quantity_rejected(self, async_client, payload):
        payload["items"][0]["received_quantity"] = -1

        response = await async_client.post("/api/purchase-orders/PO-001/receipts", json=payload)

        assert response.status_code == 422
        assert "received_quantity" in response.json()["detail"]


class TestListReceipts:
    async def test_order_receipts(self, async_client, po_store, received_items):
        po_store.list_receipts_by_order.return_value = [
            MerchandiseReceipt(id="R-1", purchase_order_id="PO-001", items=received_items)
        ]

        response = await async_client.get("/api/purchase-orders/PO-001/receipts")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["receipts"][0]["id"] == "R-1"
        assert len(data["receipts"][0]["items"]) == 2

    async def test_order_receipts_unknown_order(self, async_client, po_store):
        po_store.get_order.return_value = None

        response = await async_client.get("/api/purchase-orders/PO-404/receipts")

        assert response.status_code == 404

    async def test_all_receipts_paginated(self, async_client, po_store):
        po_store.list_receipts.return_value = []

        response = await async_client.get("/api/receipts", params={"limit": 5, "offset": 10})

        assert response.json() == {"receipts": [], "total": 0}
        po_store.list_receipts.assert_awaited_once_with(limit=5, offset=10)
