"""Core domain layer - entities, interfaces, services and exceptions."""

from inventory_costing.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
