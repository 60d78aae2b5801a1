"""Tests for unit entities and tables."""

import pytest

from inventory_costing.core.entities.units import (
    CONVERSION_FACTORS,
    DEFAULT_PRESENTATION_QUANTITIES,
    UNIT_CATEGORIES,
    Unit,
    UnitCategory,
    default_presentation_quantity,
)


class TestUnitTables:
    def test_every_unit_has_category_and_factor(self):
        for unit in Unit:
            assert unit in UNIT_CATEGORIES
            assert unit in CONVERSION_FACTORS
            assert unit in DEFAULT_PRESENTATION_QUANTITIES

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CONVERSION_FACTORS[Unit.GRAM] = 2.0  # type: ignore[index]

    @pytest.mark.parametrize(
        ("unit", "category", "factor"),
        [
            (Unit.KILOGRAM, UnitCategory.WEIGHT, 1000.0),
            (Unit.GRAM, UnitCategory.WEIGHT, 1.0),
            (Unit.LITER, UnitCategory.VOLUME, 1000.0),
            (Unit.GALLON, UnitCategory.VOLUME, 3785.41),
            (Unit.DOZEN, UnitCategory.COUNT, 12.0),
            (Unit.HALF_DOZEN, UnitCategory.COUNT, 6.0),
            (Unit.ROLL, UnitCategory.OTHER, 1.0),
        ],
    )
    def test_known_values(self, unit, category, factor):
        assert UNIT_CATEGORIES[unit] == category
        assert CONVERSION_FACTORS[unit] == factor

    def test_units_parse_from_strings(self):
        assert Unit("half_dozen") is Unit.HALF_DOZEN


class TestDefaultPresentationQuantity:
    def test_box_defaults_to_twelve(self):
        assert default_presentation_quantity(Unit.BOX) == 12

    def test_gram_defaults_to_hundred(self):
        assert default_presentation_quantity(Unit.GRAM) == 100
