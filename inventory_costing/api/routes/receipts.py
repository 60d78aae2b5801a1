"""Merchandise receipt endpoints."""

from fastapi import APIRouter, Depends, status

from inventory_costing.api.dependencies import get_po_store, get_process_receipt_use_case
from inventory_costing.application.dto.requests import ProcessReceiptRequest
from inventory_costing.application.dto.responses import (
    ErrorResponse,
    MerchandiseReceiptListResponse,
    ProcessReceiptResponse,
)
from inventory_costing.application.use_cases import ProcessMerchandiseReceiptUseCase
from inventory_costing.core.exceptions import PurchaseOrderNotFoundError
from inventory_costing.infrastructure.storage.sqlite import SQLitePurchaseOrderStore

router = APIRouter(prefix="/api", tags=["receipts"])

_to_response = ProcessMerchandiseReceiptUseCase.receipt_to_response


@router.post(
    "/purchase-orders/{order_id}/receipts",
    response_model=ProcessReceiptResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def receive_merchandise(
    order_id: str,
    request: ProcessReceiptRequest,
    use_case: ProcessMerchandiseReceiptUseCase = Depends(get_process_receipt_use_case),
) -> ProcessReceiptResponse:
    """Receive merchandise against a purchase order."""
    result = await use_case.execute_request(order_id, request)
    return use_case.to_response(result)


@router.get(
    "/purchase-orders/{order_id}/receipts",
    response_model=MerchandiseReceiptListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_order_receipts(
    order_id: str,
    store: SQLitePurchaseOrderStore = Depends(get_po_store),
) -> MerchandiseReceiptListResponse:
    """Receipts recorded for one purchase order, newest first."""
    if await store.get_order(order_id) is None:
        raise PurchaseOrderNotFoundError(order_id)
    receipts = await store.list_receipts_by_order(order_id)
    return MerchandiseReceiptListResponse(
        receipts=[_to_response(receipt) for receipt in receipts],
        total=len(receipts),
    )


@router.get("/receipts", response_model=MerchandiseReceiptListResponse)
async def list_receipts(
    limit: int = 100,
    offset: int = 0,
    store: SQLitePurchaseOrderStore = Depends(get_po_store),
) -> MerchandiseReceiptListResponse:
    """All merchandise receipts, newest first."""
    receipts = await store.list_receipts(limit=limit, offset=offset)
    return MerchandiseReceiptListResponse(
        receipts=[_to_response(receipt) for receipt in receipts],
        total=len(receipts),
    )
