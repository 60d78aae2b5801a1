"""
Inventory receipt processor.

Applies received quantities to product stock and recomputes the weighted
average unit cost. The whole receipt is computed from one snapshot of product
state and written as a single atomic batch; an optimistic-concurrency conflict
restarts the read/compute/write cycle. Callers that persist more than product
state (the receipt record, the order status) pass a commit callable that
writes everything in the same transaction.
"""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from inventory_costing.config import get_logger
from inventory_costing.core.entities.inventory import InventoryUpdate, ProductUpdate
from inventory_costing.core.entities.product import Product
from inventory_costing.core.entities.purchasing import ReceivedItem
from inventory_costing.core.exceptions import (
    CurrencyMismatchError,
    InvalidQuantityError,
    StoreConflictError,
)
from inventory_costing.core.interfaces.product_store import IProductStore

logger = get_logger(__name__)

# Writes the computed product updates, plus anything else belonging to the receipt
ReceiptCommit = Callable[[list[ProductUpdate]], Awaitable[None]]


@dataclass
class ReceiptComputation:
    """Outcome of applying a receipt to a product snapshot."""

    inventory_updates: list[InventoryUpdate] = field(default_factory=list)
    skipped_product_ids: list[str] = field(default_factory=list)
    product_updates: list[ProductUpdate] = field(default_factory=list)


def weighted_average_cost(
    previous_stock: float,
    previous_unit_cost: float,
    received_quantity: float,
    received_unit_price: float,
) -> float:
    """Stock-weighted blend of the prior cost and the newly received price."""
    new_stock = previous_stock + received_quantity
    if new_stock > 0:
        return (
            previous_stock * previous_unit_cost + received_quantity * received_unit_price
        ) / new_stock
    return received_unit_price


class InventoryReceiptProcessor:
    """
    Receipt application with weighted average costing.

    Lines whose product no longer exists are skipped and reported. Several
    lines for the same product are chained in input order and written as one
    conditional update for that product.
    """

    DEFAULT_MAX_ATTEMPTS = 3
    DEFAULT_RETRY_DELAY = 0.05

    def __init__(
        self,
        max_attempts: int | None = None,
        retry_delay: float | None = None,
        retry_max_delay: float | None = None,
    ) -> None:
        self._max_attempts = max_attempts or self.DEFAULT_MAX_ATTEMPTS
        self._retry_delay = (
            retry_delay if retry_delay is not None else self.DEFAULT_RETRY_DELAY
        )
        self._retry_max_delay = (
            retry_max_delay if retry_max_delay is not None else self._retry_delay * 10
        )

    def compute(
        self,
        items: Sequence[ReceivedItem],
        snapshot: Mapping[str, Product],
        receipt_id: str | None = None,
        currency: str | None = None,
        received_at: datetime | None = None,
    ) -> ReceiptComputation:
        """
        Compute inventory updates from a product snapshot without writing.

        Args:
            items: Received lines, in receipt order
            snapshot: Current products keyed by ID
            receipt_id: Receipt reference stamped on updated products
            currency: Order currency; products must match when given
            received_at: Receipt timestamp (defaults to now)

        Returns:
            ReceiptComputation with one InventoryUpdate per resolvable line
        """
        received_at = received_at or datetime.now(UTC)
        result = ReceiptComputation()
        # product_id -> (stock, unit_cost) after the lines seen so far
        working: dict[str, tuple[float, float]] = {}

        for item in items:
            self._check_non_negative(item)

            product = snapshot.get(item.product_id)
            if product is None:
                logger.warning("receipt_product_missing", product_id=item.product_id)
                result.skipped_product_ids.append(item.product_id)
                continue

            if currency is not None and product.currency != currency:
                raise CurrencyMismatchError(currency, product.currency, product.id)

            previous_stock, previous_unit_cost = working.get(
                product.id, (product.stock, product.unit_cost)
            )
            new_stock = previous_stock + item.received_quantity
            unit_cost = weighted_average_cost(
                previous_stock,
                previous_unit_cost,
                item.received_quantity,
                item.received_unit_price,
            )
            working[product.id] = (new_stock, unit_cost)

            result.inventory_updates.append(
                InventoryUpdate(
                    product_id=product.id,
                    previous_stock=previous_stock,
                    added_quantity=item.received_quantity,
                    new_stock=new_stock,
                    previous_unit_cost=previous_unit_cost,
                    unit_cost=unit_cost,
                    cost_variance=unit_cost - previous_unit_cost,
                    updated_at=received_at,
                )
            )

        for product_id, (stock, unit_cost) in working.items():
            fields: dict[str, Any] = {
                "stock": stock,
                "unit_cost": unit_cost,
                "last_received_at": received_at,
            }
            if receipt_id is not None:
                fields["last_receipt_id"] = receipt_id
            result.product_updates.append(
                ProductUpdate(
                    product_id=product_id,
                    fields=fields,
                    expected_version=snapshot[product_id].version,
                )
            )

        return result

    async def apply(
        self,
        items: Sequence[ReceivedItem],
        product_store: IProductStore,
        receipt_id: str | None = None,
        currency: str | None = None,
        commit: ReceiptCommit | None = None,
    ) -> ReceiptComputation:
        """
        Read, compute and atomically write a receipt.

        Without commit the updates go to product_store.apply_batch. With commit
        it is awaited on every attempt, even when no product was resolvable,
        and a StoreConflictError it raises restarts the cycle.

        Raises:
            StoreConflictError: If every attempt lost a concurrent-update race
            StoreUnavailableError: Propagated from the store, never retried
        """
        retry_decorator = self._get_retry_decorator()
        result: ReceiptComputation = await retry_decorator(self._apply_once)(
            items, product_store, receipt_id, currency, commit
        )
        return result

    async def _apply_once(
        self,
        items: Sequence[ReceivedItem],
        product_store: IProductStore,
        receipt_id: str | None,
        currency: str | None,
        commit: ReceiptCommit | None,
    ) -> ReceiptComputation:
        product_ids = list(dict.fromkeys(item.product_id for item in items))
        snapshot = await product_store.get_products(product_ids)

        result = self.compute(items, snapshot, receipt_id=receipt_id, currency=currency)
        if commit is not None:
            await commit(result.product_updates)
        elif result.product_updates:
            await product_store.apply_batch(result.product_updates)

        logger.info(
            "receipt_applied",
            receipt_id=receipt_id,
            updated=len(result.product_updates),
            skipped=len(result.skipped_product_ids),
        )
        return result

    def _get_retry_decorator(self) -> Any:
        """Get tenacity retry decorator for optimistic-concurrency conflicts."""
        return retry(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(
                multiplier=self._retry_delay,
                min=self._retry_delay,
                max=self._retry_max_delay,
            ),
            retry=retry_if_exception_type(StoreConflictError),
            before_sleep=self._log_retry,
            reraise=True,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        """Log retry attempts."""
        logger.warning(
            "receipt_conflict_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    @staticmethod
    def _check_non_negative(item: ReceivedItem) -> None:
        for name in (
            "ordered_quantity",
            "received_quantity",
            "ordered_unit_price",
            "received_unit_price",
        ):
            value = getattr(item, name)
            if value < 0:
                raise InvalidQuantityError(name, value, item.product_id)
