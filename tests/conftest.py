"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inventory_costing.application.services import reset_services
from inventory_costing.core.entities import (
    Ingredient,
    Product,
    ProductType,
    PurchaseOrder,
    PurchaseOrderItem,
    ReceivedItem,
    Unit,
)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary data directory and drop cached singletons."""
    from inventory_costing.config import reset_settings

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    from inventory_costing.api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def flour() -> Product:
    """Base product sold by the 1000 g bag at $4.00."""
    return Product(
        id="flour",
        name="Flour",
        price=4.0,
        presentation=Unit.GRAM,
        presentation_quantity=1000,
        stock=5000,
        unit_cost=0.004,
    )


@pytest.fixture
def milk() -> Product:
    """Base product sold by the liter at $1.20."""
    return Product(
        id="milk",
        name="Milk",
        price=1.2,
        presentation=Unit.LITER,
        presentation_quantity=1,
        stock=10,
        unit_cost=1.1,
    )


@pytest.fixture
def cake(flour: Product, milk: Product) -> Product:
    """Mixed product made from flour and milk."""
    return Product(
        id="cake",
        name="Cake",
        type=ProductType.MIXED,
        ingredients=[
            Ingredient(product_id=flour.id, quantity=200, unit=Unit.GRAM, waste_percentage=10),
            Ingredient(product_id=milk.id, quantity=250, unit=Unit.MILLILITER),
        ],
    )


@pytest.fixture
def catalog(flour: Product, milk: Product) -> dict[str, Product]:
    return {flour.id: flour, milk.id: milk}


@pytest.fixture
def purchase_order() -> PurchaseOrder:
    return PurchaseOrder(
        id="PO-001",
        supplier_id="SUP-1",
        supplier_name="Mill & Dairy",
        items=[
            PurchaseOrderItem(product_id="flour", quantity=10, unit_price=4.0),
            PurchaseOrderItem(product_id="milk", quantity=5, unit_price=1.2),
        ],
    )


@pytest.fixture
def received_items() -> list[ReceivedItem]:
    return [
        ReceivedItem(
            product_id="flour",
            product_name="Flour",
            ordered_quantity=10,
            received_quantity=10,
            ordered_unit_price=4.0,
            received_unit_price=4.4,
        ),
        ReceivedItem(
            product_id="milk",
            product_name="Milk",
            ordered_quantity=5,
            received_quantity=5,
            ordered_unit_price=1.2,
            received_unit_price=1.0,
        ),
    ]
