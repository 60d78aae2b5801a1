"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import inventory_costing.infrastructure.storage.sqlite.connection as conn_module
from inventory_costing.infrastructure.storage.sqlite.connection import close_pool
from inventory_costing.infrastructure.storage.sqlite.migrations.migrator import (
    initialize_database,
)


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def migrated_db(temp_db_path: Path) -> Path:
    """Temporary database with every migration applied."""
    results = await initialize_database(temp_db_path, create_backup_before=False)
    assert all(result.success for result in results)
    return temp_db_path


@pytest.fixture
async def sqlite_pool(migrated_db: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Global connection pool pointed at the migrated temporary database."""
    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield migrated_db
        finally:
            await close_pool()
