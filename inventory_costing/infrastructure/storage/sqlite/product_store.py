"""SQLite implementation of product storage."""

import json
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

import aiosqlite

from inventory_costing.config import get_logger
from inventory_costing.core.entities.inventory import ProductUpdate
from inventory_costing.core.entities.product import Ingredient, Product, ProductType
from inventory_costing.core.entities.units import Unit
from inventory_costing.core.exceptions import (
    ProductNotFoundError,
    StoreConflictError,
    ValidationError,
)
from inventory_costing.core.interfaces.product_store import IProductStore
from inventory_costing.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    storage_errors,
)

logger = get_logger(__name__)

# Columns a product update may write; anything else is rejected before SQL is built
UPDATABLE_FIELDS = frozenset(
    {"stock", "unit_cost", "cost", "price", "last_receipt_id", "last_received_at"}
)


def check_updatable(updates: Iterable[ProductUpdate]) -> None:
    """Reject updates that name a column outside UPDATABLE_FIELDS."""
    for update in updates:
        unknown = set(update.fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError("fields", "not updatable", sorted(unknown))


async def write_product_update(
    conn: aiosqlite.Connection, update: ProductUpdate, now: str
) -> None:
    """
    Write one update inside an open transaction and bump the row version.

    Raises:
        StoreConflictError: expected_version no longer matches the row
        ProductNotFoundError: unversioned update for a missing product
    """
    names = list(update.fields)
    assignments = [f"{name} = ?" for name in names]
    params: list[Any] = [_to_db(update.fields[name]) for name in names]
    assignments += ["version = version + 1", "updated_at = ?"]
    params += [now, update.product_id]

    sql = f"UPDATE products SET {', '.join(assignments)} WHERE id = ?"
    if update.expected_version is not None:
        sql += " AND version = ?"
        params.append(update.expected_version)

    cursor = await conn.execute(sql, params)
    if cursor.rowcount == 0:
        if update.expected_version is None:
            raise ProductNotFoundError(update.product_id)
        raise StoreConflictError(update.product_id, update.expected_version)


class SQLiteProductStore(IProductStore):
    """SQLite implementation of product storage with versioned batch writes."""

    async def create_product(self, product: Product) -> Product:
        """Create a new product."""
        now = datetime.now(UTC)
        product.created_at = now
        product.updated_at = now
        with storage_errors("create_product"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO products (
                        id, name, type, price, cost, unit_cost, currency,
                        presentation, presentation_quantity, stock, ingredients,
                        version, last_receipt_id, last_received_at, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        product.id,
                        product.name,
                        product.type.value,
                        product.price,
                        product.cost,
                        product.unit_cost,
                        product.currency,
                        product.presentation.value if product.presentation else None,
                        product.presentation_quantity,
                        product.stock,
                        json.dumps([i.model_dump(mode="json") for i in product.ingredients]),
                        product.version,
                        product.last_receipt_id,
                        product.last_received_at.isoformat()
                        if product.last_received_at
                        else None,
                        product.created_at.isoformat(),
                        product.updated_at.isoformat(),
                    ),
                )
        logger.info("product_created", product_id=product.id, type=product.type.value)
        return product

    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM products WHERE id = ?", (product_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_product(row)

    async def get_products(self, product_ids: Iterable[str]) -> dict[str, Product]:
        """Get several products keyed by ID."""
        ids = list(dict.fromkeys(product_ids))
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"SELECT * FROM products WHERE id IN ({placeholders})", ids
            )
            rows = await cursor.fetchall()
            products = [self._row_to_product(row) for row in rows]
        return {product.id: product for product in products}

    async def list_products(self, limit: int = 100, offset: int = 0) -> list[Product]:
        """List products with pagination."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products ORDER BY name, id LIMIT ? OFFSET ?",
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_product(row) for row in rows]

    async def apply_batch(self, updates: list[ProductUpdate]) -> None:
        """
        Apply all updates in one transaction.

        Each update bumps the row version. When expected_version is set the
        row must still carry that version, otherwise the whole batch is rolled
        back and StoreConflictError is raised.
        """
        if not updates:
            return

        check_updatable(updates)
        now = datetime.now(UTC).isoformat()
        with storage_errors("apply_batch"):
            async with get_transaction() as conn:
                for update in updates:
                    await write_product_update(conn, update, now)

        logger.info("product_batch_applied", count=len(updates))

    @staticmethod
    def _row_to_product(row: aiosqlite.Row) -> Product:
        """Convert a database row to a Product entity."""
        ingredients = [
            Ingredient.model_validate(data) for data in json.loads(row["ingredients"] or "[]")
        ]
        return Product(
            id=row["id"],
            name=row["name"],
            type=ProductType(row["type"]),
            price=row["price"],
            cost=row["cost"],
            unit_cost=float(row["unit_cost"]),
            currency=row["currency"],
            presentation=Unit(row["presentation"]) if row["presentation"] else None,
            presentation_quantity=float(row["presentation_quantity"]),
            stock=float(row["stock"]),
            ingredients=ingredients,
            version=row["version"],
            last_receipt_id=row["last_receipt_id"],
            last_received_at=_parse_datetime(row["last_received_at"]),
            created_at=_parse_datetime(row["created_at"]) or datetime.now(UTC),
            updated_at=_parse_datetime(row["updated_at"]) or datetime.now(UTC),
        )


def _to_db(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
