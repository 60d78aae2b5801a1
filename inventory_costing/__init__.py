"""Inventory costing and unit-conversion engine."""

__version__ = "1.0.0"
