"""Units of measure and their fixed conversion table."""

from enum import Enum
from types import MappingProxyType


class UnitCategory(str, Enum):
    """Comparability class of a unit."""

    WEIGHT = "weight"  # base: gram
    VOLUME = "volume"  # base: milliliter
    COUNT = "count"  # base: single unit
    OTHER = "other"  # commercial groupings, never mixed with the other categories


class Unit(str, Enum):
    """Presentation / measurement units."""

    UNIT = "unit"
    BOX = "box"
    PACK = "pack"
    BAG = "bag"
    BOTTLE = "bottle"
    CAN = "can"
    CONTAINER = "container"
    JAR = "jar"
    DOZEN = "dozen"
    HALF_DOZEN = "half_dozen"
    KILOGRAM = "kilogram"
    GRAM = "gram"
    LITER = "liter"
    MILLILITER = "milliliter"
    GALLON = "gallon"
    BULK = "bulk"
    ROLL = "roll"
    PLATE = "plate"


UNIT_CATEGORIES: MappingProxyType[Unit, UnitCategory] = MappingProxyType(
    {
        Unit.UNIT: UnitCategory.COUNT,
        Unit.BOX: UnitCategory.COUNT,
        Unit.PACK: UnitCategory.COUNT,
        Unit.BAG: UnitCategory.COUNT,
        Unit.BOTTLE: UnitCategory.COUNT,
        Unit.CAN: UnitCategory.COUNT,
        Unit.CONTAINER: UnitCategory.COUNT,
        Unit.JAR: UnitCategory.COUNT,
        Unit.DOZEN: UnitCategory.COUNT,
        Unit.HALF_DOZEN: UnitCategory.COUNT,
        Unit.KILOGRAM: UnitCategory.WEIGHT,
        Unit.GRAM: UnitCategory.WEIGHT,
        Unit.LITER: UnitCategory.VOLUME,
        Unit.MILLILITER: UnitCategory.VOLUME,
        Unit.GALLON: UnitCategory.VOLUME,
        Unit.BULK: UnitCategory.OTHER,
        Unit.ROLL: UnitCategory.OTHER,
        Unit.PLATE: UnitCategory.OTHER,
    }
)

# Factor to the category base unit (g, ml, single unit)
CONVERSION_FACTORS: MappingProxyType[Unit, float] = MappingProxyType(
    {
        Unit.UNIT: 1.0,
        Unit.BOX: 1.0,
        Unit.PACK: 1.0,
        Unit.BAG: 1.0,
        Unit.BOTTLE: 1.0,
        Unit.CAN: 1.0,
        Unit.CONTAINER: 1.0,
        Unit.JAR: 1.0,
        Unit.DOZEN: 12.0,
        Unit.HALF_DOZEN: 6.0,
        Unit.KILOGRAM: 1000.0,
        Unit.GRAM: 1.0,
        Unit.LITER: 1000.0,
        Unit.MILLILITER: 1.0,
        Unit.GALLON: 3785.41,  # approximation, not exact
        Unit.BULK: 1.0,
        Unit.ROLL: 1.0,
        Unit.PLATE: 1.0,
    }
)

# Suggested presentation_quantity when a product is authored in this unit
DEFAULT_PRESENTATION_QUANTITIES: MappingProxyType[Unit, float] = MappingProxyType(
    {
        Unit.UNIT: 1,
        Unit.BOX: 12,
        Unit.PACK: 6,
        Unit.BAG: 1,
        Unit.BOTTLE: 1,
        Unit.CAN: 1,
        Unit.CONTAINER: 1,
        Unit.JAR: 1,
        Unit.DOZEN: 12,
        Unit.HALF_DOZEN: 6,
        Unit.KILOGRAM: 1,
        Unit.GRAM: 100,
        Unit.LITER: 1,
        Unit.MILLILITER: 500,
        Unit.GALLON: 1,
        Unit.BULK: 1,
        Unit.ROLL: 1,
        Unit.PLATE: 1,
    }
)


def default_presentation_quantity(unit: Unit) -> float:
    """Default presentation quantity for a newly authored product."""
    return DEFAULT_PRESENTATION_QUANTITIES[unit]
