"""Process Merchandise Receipt Use Case: stock in, status, variances, record."""

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from inventory_costing.application.dto.requests import ProcessReceiptRequest
from inventory_costing.application.dto.responses import (
    InventoryUpdateResponse,
    MerchandiseReceiptResponse,
    PriceVarianceResponse,
    ProcessReceiptResponse,
    ReceivedItemResponse,
)
from inventory_costing.config import bound_receipt_context, get_logger
from inventory_costing.core.entities.inventory import (
    InventoryUpdate,
    PriceVarianceReport,
    ProductUpdate,
)
from inventory_costing.core.entities.purchasing import (
    MerchandiseReceipt,
    PurchaseOrderStatus,
    ReceivedItem,
)
from inventory_costing.core.exceptions import PurchaseOrderNotFoundError
from inventory_costing.core.interfaces.product_store import IProductStore
from inventory_costing.core.interfaces.purchase_order_store import IPurchaseOrderStore
from inventory_costing.core.services import (
    InventoryReceiptProcessor,
    PriceVarianceAnalyzer,
    PurchaseOrderStatusResolver,
)

logger = get_logger(__name__)


@dataclass
class MerchandiseReceiptResult:
    """Result of processing a merchandise receipt."""

    purchase_order_id: str
    new_order_status: PurchaseOrderStatus
    receipt: MerchandiseReceipt
    inventory_updates: list[InventoryUpdate] = field(default_factory=list)
    variance_reports: list[PriceVarianceReport] = field(default_factory=list)
    skipped_product_ids: list[str] = field(default_factory=list)


class ProcessMerchandiseReceiptUseCase:
    """
    Receive merchandise against a purchase order.

    Everything a receipt writes is committed in one transaction, so a failure
    leaves products, the order and its receipt history as they were. A
    version conflict retries the whole receipt against fresh product state.
    """

    def __init__(
        self,
        product_store: IProductStore | None = None,
        purchase_order_store: IPurchaseOrderStore | None = None,
        processor: InventoryReceiptProcessor | None = None,
        status_resolver: PurchaseOrderStatusResolver | None = None,
        variance_analyzer: PriceVarianceAnalyzer | None = None,
    ):
        self._product_store = product_store
        self._purchase_order_store = purchase_order_store
        self._processor = processor
        self._status_resolver = status_resolver
        self._variance_analyzer = variance_analyzer

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from inventory_costing.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_purchase_order_store(self) -> IPurchaseOrderStore:
        if self._purchase_order_store is None:
            from inventory_costing.infrastructure.storage.sqlite import (
                get_purchase_order_store,
            )

            self._purchase_order_store = await get_purchase_order_store()
        return self._purchase_order_store

    def _get_processor(self) -> InventoryReceiptProcessor:
        if self._processor is None:
            from inventory_costing.application.services import get_receipt_processor

            self._processor = get_receipt_processor()
        return self._processor

    def _get_status_resolver(self) -> PurchaseOrderStatusResolver:
        if self._status_resolver is None:
            from inventory_costing.application.services import get_status_resolver

            self._status_resolver = get_status_resolver()
        return self._status_resolver

    def _get_variance_analyzer(self) -> PriceVarianceAnalyzer:
        if self._variance_analyzer is None:
            from inventory_costing.application.services import get_variance_analyzer

            self._variance_analyzer = get_variance_analyzer()
        return self._variance_analyzer

    async def execute(
        self,
        purchase_order_id: str,
        received_items: Sequence[ReceivedItem],
        received_by: str | None = None,
        notes: str | None = None,
    ) -> MerchandiseReceiptResult:
        """Execute merchandise receipt use case."""
        receipt_id = str(uuid.uuid4())
        with bound_receipt_context(purchase_order_id, receipt_id):
            return await self._execute(
                purchase_order_id, receipt_id, received_items, received_by, notes
            )

    async def _execute(
        self,
        purchase_order_id: str,
        receipt_id: str,
        received_items: Sequence[ReceivedItem],
        received_by: str | None,
        notes: str | None,
    ) -> MerchandiseReceiptResult:
        logger.info("receipt_processing_started", items=len(received_items))

        # 1. Load the order
        po_store = await self._get_purchase_order_store()
        order = await po_store.get_order(purchase_order_id)
        if order is None:
            raise PurchaseOrderNotFoundError(purchase_order_id)

        # 2. Closed orders accept no further receipts
        new_status = self._get_status_resolver().transition(
            order.status, received_items, order_id=order.id
        )

        # 3. Price variances and totals
        analyzer = self._get_variance_analyzer()
        variance_reports = analyzer.analyze(received_items)
        totals = analyzer.summarize(received_items)

        # 4. Receipt record
        received_at = datetime.now(UTC)
        receipt = MerchandiseReceipt(
            id=receipt_id,
            purchase_order_id=order.id,
            supplier_id=order.supplier_id,
            supplier_name=order.supplier_name,
            received_by=received_by,
            received_at=received_at,
            items=list(received_items),
            total_ordered_amount=totals.total_ordered_amount,
            total_received_amount=totals.total_received_amount,
            total_variance=totals.total_variance,
            is_complete_delivery=new_status == PurchaseOrderStatus.RECEIVED,
            notes=notes,
        )

        # 5. Stock and weighted average cost, committed together with the record
        status_change = new_status if new_status != order.status else None
        order_received_at = received_at if new_status == PurchaseOrderStatus.RECEIVED else None

        async def commit(product_updates: list[ProductUpdate]) -> None:
            nonlocal receipt
            receipt = await po_store.record_receipt(
                receipt,
                product_updates,
                status=status_change,
                received_at=order_received_at,
            )

        product_store = await self._get_product_store()
        computation = await self._get_processor().apply(
            received_items,
            product_store,
            receipt_id=receipt_id,
            currency=order.currency,
            commit=commit,
        )

        logger.info(
            "receipt_processing_complete",
            status=new_status.value,
            updated=len(computation.inventory_updates),
            skipped=len(computation.skipped_product_ids),
            total_variance=totals.total_variance,
        )

        return MerchandiseReceiptResult(
            purchase_order_id=order.id,
            new_order_status=new_status,
            receipt=receipt,
            inventory_updates=computation.inventory_updates,
            variance_reports=variance_reports,
            skipped_product_ids=computation.skipped_product_ids,
        )

    async def execute_request(
        self, purchase_order_id: str, request: ProcessReceiptRequest
    ) -> MerchandiseReceiptResult:
        """Execute from an API request."""
        items = [ReceivedItem(**item.model_dump()) for item in request.items]
        return await self.execute(
            purchase_order_id,
            items,
            received_by=request.received_by,
            notes=request.notes,
        )

    @staticmethod
    def receipt_to_response(receipt: MerchandiseReceipt) -> MerchandiseReceiptResponse:
        """Convert a receipt entity to its API response."""
        return MerchandiseReceiptResponse(
            id=receipt.id or "",
            purchase_order_id=receipt.purchase_order_id,
            supplier_id=receipt.supplier_id,
            supplier_name=receipt.supplier_name,
            received_by=receipt.received_by,
            received_at=receipt.received_at,
            items=[ReceivedItemResponse(**item.model_dump()) for item in receipt.items],
            total_ordered_amount=receipt.total_ordered_amount,
            total_received_amount=receipt.total_received_amount,
            total_variance=receipt.total_variance,
            is_complete_delivery=receipt.is_complete_delivery,
            notes=receipt.notes,
        )

    def to_response(self, result: MerchandiseReceiptResult) -> ProcessReceiptResponse:
        """Convert result to API response."""
        return ProcessReceiptResponse(
            purchase_order_id=result.purchase_order_id,
            new_order_status=result.new_order_status.value,
            inventory_updates=[
                InventoryUpdateResponse(**update.model_dump())
                for update in result.inventory_updates
            ],
            variance_reports=[
                PriceVarianceResponse(
                    product_id=report.product_id,
                    product_name=report.product_name,
                    ordered_price=report.ordered_price,
                    received_price=report.received_price,
                    variance=report.variance,
                    variance_percentage=report.variance_percentage,
                    impact=report.impact.value,
                )
                for report in result.variance_reports
            ],
            skipped_product_ids=result.skipped_product_ids,
            receipt=self.receipt_to_response(result.receipt),
        )
