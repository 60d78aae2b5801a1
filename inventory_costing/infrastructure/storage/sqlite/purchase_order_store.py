"""SQLite implementation of purchase order and merchandise receipt storage."""

import json
import uuid
from datetime import UTC, date, datetime

import aiosqlite

from inventory_costing.config import get_logger
from inventory_costing.core.entities.inventory import ProductUpdate
from inventory_costing.core.entities.purchasing import (
    MerchandiseReceipt,
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
    ReceivedItem,
)
from inventory_costing.core.exceptions import PurchaseOrderNotFoundError
from inventory_costing.core.interfaces.purchase_order_store import IPurchaseOrderStore
from inventory_costing.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    storage_errors,
)
from inventory_costing.infrastructure.storage.sqlite.product_store import (
    check_updatable,
    write_product_update,
)

logger = get_logger(__name__)


class SQLitePurchaseOrderStore(IPurchaseOrderStore):
    """SQLite implementation of purchase order and receipt storage."""

    async def create_order(self, order: PurchaseOrder) -> PurchaseOrder:
        """Create a purchase order."""
        now = datetime.now(UTC)
        order.created_at = now
        order.updated_at = now
        with storage_errors("create_order"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO purchase_orders (
                        id, supplier_id, supplier_name, currency, status, items,
                        expected_delivery_date, received_at, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        order.id,
                        order.supplier_id,
                        order.supplier_name,
                        order.currency,
                        order.status.value,
                        json.dumps([item.model_dump(mode="json") for item in order.items]),
                        order.expected_delivery_date.isoformat()
                        if order.expected_delivery_date
                        else None,
                        order.received_at.isoformat() if order.received_at else None,
                        order.created_at.isoformat(),
                        order.updated_at.isoformat(),
                    ),
                )
        logger.info("purchase_order_created", order_id=order.id, items=len(order.items))
        return order

    async def get_order(self, order_id: str) -> PurchaseOrder | None:
        """Get purchase order by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM purchase_orders WHERE id = ?", (order_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_order(row)

    async def set_status(
        self,
        order_id: str,
        status: PurchaseOrderStatus,
        received_at: datetime | None = None,
    ) -> None:
        """Set the lifecycle status of an order."""
        with storage_errors("set_status"):
            async with get_transaction() as conn:
                await self._update_status(conn, order_id, status, received_at)
        logger.info("purchase_order_status_set", order_id=order_id, status=status.value)

    async def create_receipt(self, receipt: MerchandiseReceipt) -> MerchandiseReceipt:
        """Record a merchandise receipt."""
        if receipt.id is None:
            receipt.id = str(uuid.uuid4())
        with storage_errors("create_receipt"):
            async with get_transaction() as conn:
                await self._insert_receipt(conn, receipt)
        logger.info(
            "merchandise_receipt_recorded",
            receipt_id=receipt.id,
            order_id=receipt.purchase_order_id,
        )
        return receipt

    async def record_receipt(
        self,
        receipt: MerchandiseReceipt,
        product_updates: list[ProductUpdate],
        status: PurchaseOrderStatus | None = None,
        received_at: datetime | None = None,
    ) -> MerchandiseReceipt:
        """
        Commit a whole receipt in one transaction.

        Writes the versioned product updates, the order status (when given)
        and the receipt row. Any failure, including a version conflict on one
        product, rolls back all three.
        """
        check_updatable(product_updates)
        if receipt.id is None:
            receipt.id = str(uuid.uuid4())

        now = datetime.now(UTC).isoformat()
        with storage_errors("record_receipt"):
            async with get_transaction() as conn:
                for update in product_updates:
                    await write_product_update(conn, update, now)
                if status is not None:
                    await self._update_status(
                        conn, receipt.purchase_order_id, status, received_at
                    )
                await self._insert_receipt(conn, receipt)

        logger.info(
            "merchandise_receipt_recorded",
            receipt_id=receipt.id,
            order_id=receipt.purchase_order_id,
            products=len(product_updates),
            status=status.value if status else None,
        )
        return receipt

    async def list_receipts_by_order(self, order_id: str) -> list[MerchandiseReceipt]:
        """Receipts for one order, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM merchandise_receipts
                WHERE purchase_order_id = ?
                ORDER BY created_at DESC
                """,
                (order_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_receipt(row) for row in rows]

    async def list_receipts(self, limit: int = 100, offset: int = 0) -> list[MerchandiseReceipt]:
        """All receipts, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM merchandise_receipts
                ORDER BY created_at DESC
                LIMIT ? OFFSET ?
                """,
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_receipt(row) for row in rows]

    @staticmethod
    async def _update_status(
        conn: aiosqlite.Connection,
        order_id: str,
        status: PurchaseOrderStatus,
        received_at: datetime | None,
    ) -> None:
        cursor = await conn.execute(
            """
            UPDATE purchase_orders SET
                status = ?,
                received_at = COALESCE(?, received_at),
                updated_at = ?
            WHERE id = ?
            """,
            (
                status.value,
                received_at.isoformat() if received_at else None,
                datetime.now(UTC).isoformat(),
                order_id,
            ),
        )
        if cursor.rowcount == 0:
            raise PurchaseOrderNotFoundError(order_id)

    @staticmethod
    async def _insert_receipt(conn: aiosqlite.Connection, receipt: MerchandiseReceipt) -> None:
        await conn.execute(
            """
            INSERT INTO merchandise_receipts (
                id, purchase_order_id, supplier_id, supplier_name, received_by,
                received_at, items, total_ordered_amount, total_received_amount,
                total_variance, is_complete_delivery, notes, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                receipt.id,
                receipt.purchase_order_id,
                receipt.supplier_id,
                receipt.supplier_name,
                receipt.received_by,
                receipt.received_at.isoformat(),
                json.dumps([item.model_dump(mode="json") for item in receipt.items]),
                receipt.total_ordered_amount,
                receipt.total_received_amount,
                receipt.total_variance,
                int(receipt.is_complete_delivery),
                receipt.notes,
                receipt.created_at.isoformat(),
            ),
        )

    @staticmethod
    def _row_to_order(row: aiosqlite.Row) -> PurchaseOrder:
        """Convert a database row to a PurchaseOrder entity."""
        expected_delivery_date = None
        if row["expected_delivery_date"]:
            try:
                expected_delivery_date = date.fromisoformat(row["expected_delivery_date"])
            except (ValueError, TypeError):
                pass

        return PurchaseOrder(
            id=row["id"],
            supplier_id=row["supplier_id"],
            supplier_name=row["supplier_name"],
            currency=row["currency"],
            status=PurchaseOrderStatus(row["status"]),
            items=[
                PurchaseOrderItem.model_validate(data)
                for data in json.loads(row["items"] or "[]")
            ],
            expected_delivery_date=expected_delivery_date,
            received_at=_parse_datetime(row["received_at"]),
            created_at=_parse_datetime(row["created_at"]) or datetime.now(UTC),
            updated_at=_parse_datetime(row["updated_at"]) or datetime.now(UTC),
        )

    @staticmethod
    def _row_to_receipt(row: aiosqlite.Row) -> MerchandiseReceipt:
        """Convert a database row to a MerchandiseReceipt entity."""
        return MerchandiseReceipt(
            id=row["id"],
            purchase_order_id=row["purchase_order_id"],
            supplier_id=row["supplier_id"],
            supplier_name=row["supplier_name"],
            received_by=row["received_by"],
            received_at=_parse_datetime(row["received_at"]) or datetime.now(UTC),
            items=[ReceivedItem.model_validate(data) for data in json.loads(row["items"] or "[]")],
            total_ordered_amount=float(row["total_ordered_amount"]),
            total_received_amount=float(row["total_received_amount"]),
            total_variance=float(row["total_variance"]),
            is_complete_delivery=bool(row["is_complete_delivery"]),
            notes=row["notes"],
            created_at=_parse_datetime(row["created_at"]) or datetime.now(UTC),
        )


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
