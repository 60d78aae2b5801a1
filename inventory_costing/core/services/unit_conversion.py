"""
Unit conversion registry.

Classifies units into comparability categories and converts values between
units of the same category through the category base unit (gram, milliliter,
single unit). The lookup tables are module constants and never change at
runtime.
"""

from collections.abc import Mapping

from inventory_costing.core.entities.units import (
    CONVERSION_FACTORS,
    UNIT_CATEGORIES,
    Unit,
    UnitCategory,
)
from inventory_costing.core.exceptions import IncompatibleUnitsError


class UnitConversionRegistry:
    """
    Lookup and conversion over a fixed unit table.

    Stateless apart from the (read-only) tables it is built with; the default
    instance wraps the module constants.
    """

    def __init__(
        self,
        categories: Mapping[Unit, UnitCategory] = UNIT_CATEGORIES,
        factors: Mapping[Unit, float] = CONVERSION_FACTORS,
    ) -> None:
        self._categories = categories
        self._factors = factors

    def category_of(self, unit: Unit) -> UnitCategory:
        return self._categories[Unit(unit)]

    def factor_of(self, unit: Unit) -> float:
        return self._factors[Unit(unit)]

    def are_compatible(self, unit_a: Unit, unit_b: Unit) -> bool:
        """True when both units belong to the same category."""
        return self.category_of(unit_a) == self.category_of(unit_b)

    def convert(self, value: float, from_unit: Unit, to_unit: Unit) -> float:
        """
        Convert value expressed in from_unit into to_unit.

        Args:
            value: Quantity in from_unit
            from_unit: Source unit
            to_unit: Target unit

        Returns:
            Quantity in to_unit

        Raises:
            IncompatibleUnitsError: If the units belong to different categories
        """
        if not self.are_compatible(from_unit, to_unit):
            raise IncompatibleUnitsError(Unit(from_unit).value, Unit(to_unit).value)
        base_value = value * self.factor_of(from_unit)
        return base_value / self.factor_of(to_unit)

    def units_in(self, category: UnitCategory) -> list[Unit]:
        """Units belonging to a category, in declaration order."""
        return [unit for unit in Unit if self._categories[unit] == category]


_registry = UnitConversionRegistry()


def get_unit_registry() -> UnitConversionRegistry:
    """Shared registry over the built-in unit table."""
    return _registry
