"""
Domain exceptions for the inventory costing engine.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class CostingError(Exception):
    """Base exception for all costing engine errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Conversion Exceptions
class ConversionError(CostingError):
    """Base exception for unit and currency conversion."""

    pass


class IncompatibleUnitsError(ConversionError):
    """Two units belong to different measurement categories."""

    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(
            f"Incompatible units: {from_unit} and {to_unit}",
            code="INCOMPATIBLE_UNITS",
            details={"from_unit": from_unit, "to_unit": to_unit},
        )


class CurrencyMismatchError(ConversionError):
    """Values tagged with different currencies cannot be combined."""

    def __init__(self, expected: str, actual: str, product_id: str | None = None):
        super().__init__(
            f"Currency mismatch: expected {expected}, got {actual}",
            code="CURRENCY_MISMATCH",
            details={"expected": expected, "actual": actual, "product_id": product_id},
        )


# Storage Exceptions
class StorageError(CostingError):
    """Base exception for storage operations."""

    pass


class ProductNotFoundError(StorageError):
    """Product not found in storage."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class PurchaseOrderNotFoundError(StorageError):
    """Purchase order not found in storage."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Purchase order not found: {order_id}",
            code="PURCHASE_ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class StoreConflictError(StorageError):
    """A conditional write lost an optimistic-concurrency race."""

    def __init__(self, product_id: str, expected_version: int | None = None):
        super().__init__(
            f"Concurrent update detected for product {product_id}",
            code="STORE_CONFLICT",
            details={"product_id": product_id, "expected_version": expected_version},
        )


class StoreUnavailableError(StorageError):
    """The backing store could not be reached or is locked."""

    def __init__(self, operation: str, reason: str | None = None):
        super().__init__(
            f"Store unavailable during {operation}" + (f" - {reason}" if reason else ""),
            code="STORE_UNAVAILABLE",
            details={"operation": operation, "reason": reason},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Purchasing Exceptions
class PurchaseOrderClosedError(CostingError):
    """Stock cannot be received against an order in a terminal state."""

    def __init__(self, order_id: str, status: str):
        super().__init__(
            f"Purchase order {order_id} is {status} and cannot receive stock",
            code="PURCHASE_ORDER_CLOSED",
            details={"order_id": order_id, "status": status},
        )


# Validation Exceptions
class ValidationError(CostingError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidQuantityError(ValidationError):
    """A quantity or price is negative."""

    def __init__(self, field: str, value: float, product_id: str | None = None):
        super().__init__(field=field, message="must be non-negative", value=value)
        self.code = "INVALID_QUANTITY"
        self.details["product_id"] = product_id
