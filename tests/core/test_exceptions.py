"""Unit tests for domain exceptions."""

import pytest

from inventory_costing.core.exceptions import (
    ConversionError,
    CostingError,
    CurrencyMismatchError,
    DatabaseError,
    IncompatibleUnitsError,
    InvalidQuantityError,
    ProductNotFoundError,
    PurchaseOrderClosedError,
    PurchaseOrderNotFoundError,
    StorageError,
    StoreConflictError,
    StoreUnavailableError,
    ValidationError,
)


class TestCostingError:
    """Tests for base CostingError exception."""

    def test_basic_initialization(self):
        error = CostingError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "CostingError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = CostingError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = CostingError("Boom", code="BOOM", details={"key": "value"})
        assert error.to_dict() == {
            "error": "BOOM",
            "message": "Boom",
            "details": {"key": "value"},
        }


class TestConversionErrors:
    def test_incompatible_units(self):
        error = IncompatibleUnitsError("kilogram", "liter")
        assert isinstance(error, ConversionError)
        assert error.code == "INCOMPATIBLE_UNITS"
        assert error.details == {"from_unit": "kilogram", "to_unit": "liter"}
        assert "kilogram" in error.message

    def test_currency_mismatch(self):
        error = CurrencyMismatchError("USD", "EUR", product_id="flour")
        assert isinstance(error, ConversionError)
        assert error.code == "CURRENCY_MISMATCH"
        assert error.details["product_id"] == "flour"


class TestStorageErrors:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ProductNotFoundError("p1"), "PRODUCT_NOT_FOUND"),
            (PurchaseOrderNotFoundError("po1"), "PURCHASE_ORDER_NOT_FOUND"),
            (StoreConflictError("p1", 3), "STORE_CONFLICT"),
            (StoreUnavailableError("apply_batch", "locked"), "STORE_UNAVAILABLE"),
            (DatabaseError("insert", "disk full"), "DATABASE_ERROR"),
        ],
    )
    def test_codes_and_hierarchy(self, error, code):
        assert isinstance(error, StorageError)
        assert error.code == code

    def test_conflict_details(self):
        error = StoreConflictError("flour", expected_version=2)
        assert error.details == {"product_id": "flour", "expected_version": 2}

    def test_unavailable_without_reason(self):
        error = StoreUnavailableError("get_products")
        assert error.message == "Store unavailable during get_products"


class TestPurchaseOrderClosedError:
    def test_not_a_storage_error(self):
        error = PurchaseOrderClosedError("PO-1", "received")
        assert not isinstance(error, StorageError)
        assert error.code == "PURCHASE_ORDER_CLOSED"
        assert error.details["status"] == "received"


class TestValidationErrors:
    def test_validation_error_truncates_value(self):
        error = ValidationError("name", "too long", "x" * 500)
        assert len(error.details["value"]) == 100

    def test_invalid_quantity(self):
        error = InvalidQuantityError("received_quantity", -1, product_id="flour")
        assert isinstance(error, ValidationError)
        assert error.code == "INVALID_QUANTITY"
        assert error.details["field"] == "received_quantity"
        assert error.details["product_id"] == "flour"
