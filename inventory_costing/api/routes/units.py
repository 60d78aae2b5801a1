"""Unit catalog and conversion endpoints."""

from fastapi import APIRouter, Depends

from inventory_costing.api.dependencies import get_registry
from inventory_costing.application.dto.requests import ConvertUnitRequest
from inventory_costing.application.dto.responses import (
    ConversionResponse,
    ErrorResponse,
    UnitResponse,
)
from inventory_costing.core.entities.units import (
    Unit,
    UnitCategory,
    default_presentation_quantity,
)
from inventory_costing.core.services import UnitConversionRegistry

router = APIRouter(prefix="/api/units", tags=["units"])


@router.get("", response_model=list[UnitResponse])
async def list_units(
    category: UnitCategory | None = None,
    registry: UnitConversionRegistry = Depends(get_registry),
) -> list[UnitResponse]:
    """List known units, optionally restricted to one category."""
    units = registry.units_in(category) if category else list(Unit)
    return [
        UnitResponse(
            unit=unit.value,
            category=registry.category_of(unit).value,
            factor=registry.factor_of(unit),
            default_presentation_quantity=default_presentation_quantity(unit),
        )
        for unit in units
    ]


@router.post(
    "/convert",
    response_model=ConversionResponse,
    responses={422: {"model": ErrorResponse}},
)
async def convert_units(
    request: ConvertUnitRequest,
    registry: UnitConversionRegistry = Depends(get_registry),
) -> ConversionResponse:
    """Convert a quantity between two units of the same category."""
    result = registry.convert(request.value, request.from_unit, request.to_unit)
    return ConversionResponse(
        value=request.value,
        from_unit=request.from_unit.value,
        to_unit=request.to_unit.value,
        result=result,
        category=registry.category_of(request.from_unit).value,
    )
