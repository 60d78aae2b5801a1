"""Fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI


@pytest.fixture
def app() -> Iterator[FastAPI]:
    """Application instance with dependency overrides cleared afterwards."""
    from inventory_costing.api.main import app as application

    yield application
    application.dependency_overrides.clear()
