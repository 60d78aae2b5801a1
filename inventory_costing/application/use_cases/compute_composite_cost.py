"""Compute Composite Cost Use Case: mixed product costing and availability."""

from collections.abc import Sequence
from dataclasses import dataclass

from inventory_costing.application.dto.requests import CompositeCostRequest
from inventory_costing.application.dto.responses import (
    AvailabilityResponse,
    CompositeCostResponse,
    CostLineResponse,
)
from inventory_costing.config import get_logger, get_settings
from inventory_costing.core.entities.costing import CompositeCostBreakdown
from inventory_costing.core.entities.inventory import ProductUpdate
from inventory_costing.core.entities.product import Ingredient, Product
from inventory_costing.core.exceptions import ProductNotFoundError, ValidationError
from inventory_costing.core.interfaces.product_store import IProductStore
from inventory_costing.core.services import CompositeProductCostAggregator

logger = get_logger(__name__)


@dataclass
class CompositeCostResult:
    """Result of costing an ingredient list."""

    breakdown: CompositeCostBreakdown
    total_cost: float  # rounded to the configured decimals
    product_id: str | None = None
    persisted: bool = False


@dataclass
class AvailabilityResult:
    """Units of a product obtainable from current stock."""

    product: Product
    available_units: int


class ComputeCompositeCostUseCase:
    """Cost mixed products from the stored catalog."""

    def __init__(
        self,
        product_store: IProductStore | None = None,
        aggregator: CompositeProductCostAggregator | None = None,
        cost_decimals: int | None = None,
    ):
        self._product_store = product_store
        self._aggregator = aggregator
        self._cost_decimals = cost_decimals

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from inventory_costing.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    def _get_aggregator(self) -> CompositeProductCostAggregator:
        if self._aggregator is None:
            from inventory_costing.application.services import get_composite_cost_aggregator

            self._aggregator = get_composite_cost_aggregator()
        return self._aggregator

    @property
    def cost_decimals(self) -> int:
        if self._cost_decimals is None:
            self._cost_decimals = get_settings().costing.cost_decimals
        return self._cost_decimals

    async def _load_catalog(self, ingredients: Sequence[Ingredient]) -> dict[str, Product]:
        store = await self._get_product_store()
        return await store.get_products(ingredient.product_id for ingredient in ingredients)

    async def execute(
        self,
        ingredients: Sequence[Ingredient],
        currency: str | None = None,
    ) -> CompositeCostResult:
        """Cost an ingredient list against the stored base products."""
        catalog = await self._load_catalog(ingredients)
        breakdown = self._get_aggregator().breakdown(list(ingredients), catalog, currency)
        total = round(breakdown.total_cost, self.cost_decimals)

        logger.info(
            "composite_cost_computed",
            ingredients=len(ingredients),
            total_cost=total,
            flagged=len(breakdown.flagged_lines),
        )
        return CompositeCostResult(breakdown=breakdown, total_cost=total)

    async def execute_request(self, request: CompositeCostRequest) -> CompositeCostResult:
        """Execute from an API request."""
        ingredients = [Ingredient(**line.model_dump()) for line in request.ingredients]
        return await self.execute(ingredients, currency=request.currency)

    async def recalculate(self, product_id: str, persist: bool = True) -> CompositeCostResult:
        """
        Recompute a stored mixed product's cost from its ingredients.

        The rounded cost is written through the atomic batch, guarded by the
        product version that was read.

        Raises:
            ProductNotFoundError: If the product does not exist
            ValidationError: If the product is not a mixed product
            StoreConflictError: If the product changed while costing
        """
        store = await self._get_product_store()
        product = await store.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        if not product.is_mixed:
            raise ValidationError("type", "only mixed products have a derived cost", product_id)

        result = await self.execute(product.ingredients, currency=product.currency)
        result.product_id = product.id

        if persist:
            await store.apply_batch(
                [
                    ProductUpdate(
                        product_id=product.id,
                        fields={"cost": result.total_cost},
                        expected_version=product.version,
                    )
                ]
            )
            result.persisted = True
            logger.info("composite_cost_persisted", product_id=product.id, cost=result.total_cost)

        return result

    async def availability(self, product_id: str) -> AvailabilityResult:
        """Units of a product that current stock allows."""
        store = await self._get_product_store()
        product = await store.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        catalog = await self._load_catalog(product.ingredients) if product.is_mixed else {}
        available = self._get_aggregator().available_units(product, catalog)
        return AvailabilityResult(product=product, available_units=available)

    @staticmethod
    def to_response(result: CompositeCostResult) -> CompositeCostResponse:
        """Convert result to API response."""
        breakdown = result.breakdown
        return CompositeCostResponse(
            product_id=result.product_id,
            total_cost=result.total_cost,
            lines=[
                CostLineResponse(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    converted_quantity=line.converted_quantity,
                    cost=line.cost,
                    status=line.status.value,
                    message=line.message,
                )
                for line in breakdown.lines
            ],
            flagged_count=len(breakdown.flagged_lines),
            used_fallback=breakdown.used_fallback,
            persisted=result.persisted,
        )

    @staticmethod
    def availability_to_response(result: AvailabilityResult) -> AvailabilityResponse:
        return AvailabilityResponse(
            product_id=result.product.id,
            product_type=result.product.type.value,
            available_units=result.available_units,
        )
