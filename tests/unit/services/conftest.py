"""Pytest configuration for unit service tests.

Services are exercised against in-memory products and AsyncMock stores;
nothing here touches the database.
"""

from unittest.mock import AsyncMock

import pytest

from inventory_costing.core.interfaces import IProductStore


@pytest.fixture
def mock_product_store() -> AsyncMock:
    store = AsyncMock(spec=IProductStore)
    store.apply_batch.return_value = None
    return store
