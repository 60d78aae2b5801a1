"""Tests for inventory and costing result entities."""

import pytest
from pydantic import ValidationError

from inventory_costing.core.entities.costing import (
    CompositeCostBreakdown,
    CostLineStatus,
    IngredientCostLine,
)
from inventory_costing.core.entities.inventory import (
    InventoryUpdate,
    ProductUpdate,
)


class TestInventoryUpdate:
    def test_frozen(self):
        update = InventoryUpdate(
            product_id="flour",
            previous_stock=0,
            added_quantity=10,
            new_stock=10,
            previous_unit_cost=0,
            unit_cost=4.0,
            cost_variance=4.0,
        )
        with pytest.raises(ValidationError):
            update.new_stock = 20  # type: ignore[misc]


class TestProductUpdate:
    def test_unconditional_by_default(self):
        update = ProductUpdate(product_id="flour", fields={"stock": 1})
        assert update.expected_version is None


class TestCostLineStatus:
    def test_only_priced_needs_no_review(self):
        assert not CostLineStatus.PRICED.needs_review
        for status in CostLineStatus:
            if status != CostLineStatus.PRICED:
                assert status.needs_review


class TestCompositeCostBreakdown:
    def test_flagged_lines_and_fallback(self):
        breakdown = CompositeCostBreakdown(
            lines=[
                IngredientCostLine(product_id="a", quantity=1, cost=1.0),
                IngredientCostLine(
                    product_id="b", quantity=1, cost=2.0, status=CostLineStatus.FALLBACK
                ),
                IngredientCostLine(
                    product_id="c", quantity=1, status=CostLineStatus.MISSING_PRODUCT
                ),
            ],
            total_cost=3.0,
        )
        assert [line.product_id for line in breakdown.flagged_lines] == ["b", "c"]
        assert breakdown.used_fallback

    def test_clean_breakdown(self):
        breakdown = CompositeCostBreakdown(
            lines=[IngredientCostLine(product_id="a", quantity=1, cost=1.0)],
            total_cost=1.0,
        )
        assert breakdown.flagged_lines == []
        assert not breakdown.used_fallback
