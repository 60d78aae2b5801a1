"""Composite product costing endpoints."""

from fastapi import APIRouter, Depends

from inventory_costing.api.dependencies import get_compute_composite_cost_use_case
from inventory_costing.application.dto.requests import (
    CompositeCostRequest,
    RecalculateCostRequest,
)
from inventory_costing.application.dto.responses import (
    AvailabilityResponse,
    CompositeCostResponse,
    ErrorResponse,
)
from inventory_costing.application.use_cases import ComputeCompositeCostUseCase

router = APIRouter(prefix="/api/costing", tags=["costing"])


@router.post(
    "/composite",
    response_model=CompositeCostResponse,
    responses={422: {"model": ErrorResponse}},
)
async def compute_composite_cost(
    request: CompositeCostRequest,
    use_case: ComputeCompositeCostUseCase = Depends(get_compute_composite_cost_use_case),
) -> CompositeCostResponse:
    """Cost an ingredient list against the stored base products."""
    result = await use_case.execute_request(request)
    return use_case.to_response(result)


@router.post(
    "/products/{product_id}/recalculate",
    response_model=CompositeCostResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def recalculate_product_cost(
    product_id: str,
    request: RecalculateCostRequest | None = None,
    use_case: ComputeCompositeCostUseCase = Depends(get_compute_composite_cost_use_case),
) -> CompositeCostResponse:
    """Recompute a mixed product's cost from its ingredients."""
    persist = request.persist if request else True
    result = await use_case.recalculate(product_id, persist=persist)
    return use_case.to_response(result)


@router.get(
    "/products/{product_id}/availability",
    response_model=AvailabilityResponse,
    responses={404: {"model": ErrorResponse}},
)
async def product_availability(
    product_id: str,
    use_case: ComputeCompositeCostUseCase = Depends(get_compute_composite_cost_use_case),
) -> AvailabilityResponse:
    """Units of a product that current stock allows."""
    result = await use_case.availability(product_id)
    return use_case.availability_to_response(result)
