"""
Ingredient costing service.

Prices the ingredient lines of a mixed product against the catalog of base
products and sums them into the mixed product's unit cost.
"""

import math
from collections.abc import Iterable, Mapping

from inventory_costing.config import get_logger
from inventory_costing.core.entities.costing import (
    CompositeCostBreakdown,
    CostLineStatus,
    IngredientCostLine,
)
from inventory_costing.core.entities.product import Ingredient, Product
from inventory_costing.core.exceptions import (
    CurrencyMismatchError,
    IncompatibleUnitsError,
    ValidationError,
)
from inventory_costing.core.services.unit_conversion import (
    UnitConversionRegistry,
    get_unit_registry,
)

logger = get_logger(__name__)

Catalog = Mapping[str, Product] | Iterable[Product]


def index_catalog(catalog: Catalog) -> dict[str, Product]:
    """Index products by ID so lookups inside the costing loop are O(1)."""
    if isinstance(catalog, Mapping):
        return dict(catalog)
    return {product.id: product for product in catalog}


class IngredientCostCalculator:
    """
    Prices one ingredient line.

    cost = converted_quantity * (price / presentation_quantity) * (1 + waste/100)

    where converted_quantity is the ingredient quantity expressed in the base
    product's presentation unit.
    """

    def __init__(
        self,
        registry: UnitConversionRegistry | None = None,
        allow_unit_fallback: bool = True,
    ) -> None:
        self._registry = registry or get_unit_registry()
        self._allow_fallback = allow_unit_fallback

    @property
    def registry(self) -> UnitConversionRegistry:
        return self._registry

    def cost(
        self,
        ingredient: Ingredient,
        base_product: Product,
        currency: str | None = None,
    ) -> float:
        """
        Cost contributed by one ingredient.

        Raises:
            IncompatibleUnitsError: Ingredient unit and presentation differ in category
            CurrencyMismatchError: Base product is priced in another currency
        """
        return self.price_line(ingredient, base_product, currency).cost

    def price_line(
        self,
        ingredient: Ingredient,
        base_product: Product,
        currency: str | None = None,
    ) -> IngredientCostLine:
        """Price an ingredient and report how the price was obtained."""
        if base_product.price is None:
            return IngredientCostLine(
                product_id=ingredient.product_id,
                quantity=ingredient.quantity,
                status=CostLineStatus.NO_PRICE,
                message=f"Base product {base_product.id} has no price",
            )

        if currency is not None and base_product.currency != currency:
            raise CurrencyMismatchError(currency, base_product.currency, base_product.id)

        if ingredient.unit is None or base_product.presentation is None:
            return self._fallback_line(ingredient, base_product, base_product.price)

        converted = self._registry.convert(
            ingredient.quantity, ingredient.unit, base_product.presentation
        )
        cost_per_base_unit = base_product.price / base_product.presentation_quantity
        return IngredientCostLine(
            product_id=ingredient.product_id,
            quantity=ingredient.quantity,
            converted_quantity=converted,
            cost=converted * cost_per_base_unit * ingredient.waste_multiplier,
        )

    def _fallback_line(
        self, ingredient: Ingredient, base_product: Product, price: float
    ) -> IngredientCostLine:
        """Price without conversion, assuming the quantity is already in presentation units."""
        if not self._allow_fallback:
            raise ValidationError(
                field="unit",
                message="ingredient unit or base product presentation is missing",
                value=ingredient.product_id,
            )

        cost = ingredient.quantity * price * ingredient.waste_multiplier
        logger.warning(
            "ingredient_cost_fallback",
            product_id=ingredient.product_id,
            ingredient_unit=ingredient.unit.value if ingredient.unit else None,
            presentation=base_product.presentation.value if base_product.presentation else None,
            cost=round(cost, 4),
        )
        return IngredientCostLine(
            product_id=ingredient.product_id,
            quantity=ingredient.quantity,
            converted_quantity=ingredient.quantity,
            cost=cost,
            status=CostLineStatus.FALLBACK,
            message="Units missing; quantity priced as presentation units",
        )


class CompositeProductCostAggregator:
    """
    Sums ingredient costs into a mixed product's unit cost.

    Missing base products contribute zero. Lines with incompatible units or a
    foreign currency contribute zero and are flagged, unless strict_units is
    set, in which case the error propagates to the caller.
    """

    def __init__(
        self,
        calculator: IngredientCostCalculator | None = None,
        strict_units: bool = False,
    ) -> None:
        self._calculator = calculator or IngredientCostCalculator()
        self._registry = self._calculator.registry
        self._strict = strict_units

    def total_cost(
        self,
        ingredients: list[Ingredient],
        catalog: Catalog,
        currency: str | None = None,
    ) -> float:
        """Total unit cost of a mixed product; 0.0 when nothing is resolvable."""
        return self.breakdown(ingredients, catalog, currency).total_cost

    def breakdown(
        self,
        ingredients: list[Ingredient],
        catalog: Catalog,
        currency: str | None = None,
    ) -> CompositeCostBreakdown:
        """Per-ingredient cost lines plus their total."""
        products = index_catalog(catalog)
        lines: list[IngredientCostLine] = []

        for ingredient in ingredients:
            base_product = products.get(ingredient.product_id)
            if base_product is None:
                logger.info("ingredient_product_missing", product_id=ingredient.product_id)
                lines.append(
                    IngredientCostLine(
                        product_id=ingredient.product_id,
                        quantity=ingredient.quantity,
                        status=CostLineStatus.MISSING_PRODUCT,
                        message=f"Product not found: {ingredient.product_id}",
                    )
                )
                continue

            try:
                line = self._calculator.price_line(ingredient, base_product, currency)
            except IncompatibleUnitsError as e:
                if self._strict:
                    raise
                line = self._flagged(ingredient, CostLineStatus.INCOMPATIBLE_UNITS, e.message)
            except CurrencyMismatchError as e:
                if self._strict:
                    raise
                line = self._flagged(ingredient, CostLineStatus.CURRENCY_MISMATCH, e.message)

            lines.append(line)

        total = sum(line.cost for line in lines)
        flagged = [line for line in lines if line.status.needs_review]
        if flagged:
            logger.warning(
                "composite_cost_flagged_lines",
                flagged=len(flagged),
                statuses=[line.status.value for line in flagged],
            )
        return CompositeCostBreakdown(lines=lines, total_cost=total)

    def available_units(self, product: Product, catalog: Catalog) -> int:
        """
        How many units of a product can be made or sold from current stock.

        Base products report their own stock. Mixed products are limited by
        their scarcest ingredient, with each ingredient quantity converted into
        the base product's presentation unit.
        """
        if not product.is_mixed:
            return math.floor(product.stock)
        if not product.ingredients:
            return 0

        products = index_catalog(catalog)
        available: list[int] = []
        for ingredient in product.ingredients:
            base_product = products.get(ingredient.product_id)
            if base_product is None:
                return 0

            needed = ingredient.quantity
            if ingredient.unit is not None and base_product.presentation is not None:
                if not self._registry.are_compatible(
                    ingredient.unit, base_product.presentation
                ):
                    logger.warning(
                        "availability_incompatible_units",
                        product_id=product.id,
                        ingredient_id=ingredient.product_id,
                    )
                    return 0
                needed = self._registry.convert(
                    ingredient.quantity, ingredient.unit, base_product.presentation
                )
            available.append(math.floor(base_product.stock / needed))

        return min(available)

    @staticmethod
    def _flagged(
        ingredient: Ingredient, status: CostLineStatus, message: str
    ) -> IngredientCostLine:
        logger.warning(
            "ingredient_line_skipped",
            product_id=ingredient.product_id,
            status=status.value,
            reason=message,
        )
        return IngredientCostLine(
            product_id=ingredient.product_id,
            quantity=ingredient.quantity,
            status=status,
            message=message,
        )


def compute_composite_product_cost(
    ingredients: list[Ingredient],
    catalog: Catalog,
) -> float:
    """Cost of a mixed product from its ingredient list, with default policies."""
    return CompositeProductCostAggregator().total_cost(ingredients, catalog)
