"""Tests for product entities."""

import pytest
from pydantic import ValidationError

from inventory_costing.core.entities.product import Ingredient, Product, ProductType
from inventory_costing.core.entities.units import Unit


class TestIngredient:
    def test_waste_multiplier(self):
        ingredient = Ingredient(product_id="flour", quantity=200, waste_percentage=10)
        assert ingredient.waste_multiplier == pytest.approx(1.1)

    def test_defaults(self):
        ingredient = Ingredient(product_id="flour", quantity=1)
        assert ingredient.unit is None
        assert ingredient.waste_multiplier == 1.0

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Ingredient(product_id="flour", quantity=0)


class TestProduct:
    def test_defaults(self):
        product = Product(id="p1")
        assert product.type == ProductType.BASE
        assert product.price is None
        assert product.presentation_quantity == 1.0
        assert product.version == 0
        assert not product.is_mixed

    def test_inventory_value(self):
        product = Product(id="p1", stock=10, unit_cost=2.5)
        assert product.inventory_value == 25.0

    def test_mixed(self):
        product = Product(
            id="cake",
            type=ProductType.MIXED,
            ingredients=[Ingredient(product_id="flour", quantity=200, unit=Unit.GRAM)],
        )
        assert product.is_mixed
        assert product.ingredients[0].unit == Unit.GRAM

    def test_presentation_quantity_at_least_one(self):
        with pytest.raises(ValidationError):
            Product(id="p1", presentation_quantity=0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            Product(id="p1", stock=-1)
