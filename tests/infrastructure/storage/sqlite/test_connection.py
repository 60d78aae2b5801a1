"""Unit tests for SQLite connection pool."""

import asyncio
from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

import inventory_costing.infrastructure.storage.sqlite.connection as conn_module
from inventory_costing.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)


class TestConnectionPoolInit:
    """Tests for ConnectionPool initialization."""

    def test_defaults(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path)
        assert pool.db_path == temp_db_path
        assert pool.pool_size == 5
        assert pool.busy_timeout == 30000
        assert pool._initialized is False
        assert pool._connections == []

    def test_custom_values(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=10, busy_timeout=60000)
        assert pool.pool_size == 10
        assert pool.busy_timeout == 60000


class TestConnectionPoolInitialize:
    """Tests for ConnectionPool.initialize()."""

    async def test_initialize_creates_directory(self, tmp_path: Path):
        """Initialize creates database directory if not exists."""
        db_path = tmp_path / "subdir" / "nested" / "test.db"
        pool = ConnectionPool(db_path, pool_size=1)

        await pool.initialize()
        assert db_path.parent.exists()
        await pool.close()

    async def test_initialize_idempotent(self, temp_db_path: Path):
        """Multiple initialize calls are safe."""
        pool = ConnectionPool(temp_db_path, pool_size=2)

        await pool.initialize()
        await pool.initialize()

        assert len(pool._connections) == 2
        assert pool._pool.qsize() == 2
        await pool.close()

    async def test_connection_pragmas(self, temp_db_path: Path):
        """Connections use WAL, enforce foreign keys and return rows."""
        pool = ConnectionPool(temp_db_path)
        conn = await pool._create_connection()

        cursor = await conn.execute("PRAGMA journal_mode")
        assert (await cursor.fetchone())[0].lower() == "wal"
        cursor = await conn.execute("PRAGMA foreign_keys")
        assert (await cursor.fetchone())[0] == 1
        assert conn.row_factory == aiosqlite.Row
        await conn.close()


class TestConnectionPoolAcquire:
    """Tests for ConnectionPool.acquire()."""

    async def test_acquire_auto_initializes(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)

        async with pool.acquire() as conn:
            assert pool._initialized is True
            assert isinstance(conn, aiosqlite.Connection)

        await pool.close()

    async def test_acquire_returns_on_exception(self, temp_db_path: Path):
        """Connection is returned even if exception occurs."""
        pool = ConnectionPool(temp_db_path, pool_size=1)
        await pool.initialize()

        with pytest.raises(ValueError):
            async with pool.acquire() as _conn:
                raise ValueError("Test error")

        assert pool._pool.qsize() == 1
        await pool.close()

    async def test_acquire_blocks_when_pool_exhausted(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)
        await pool.initialize()

        async with pool.acquire() as _conn1:
            with pytest.raises(asyncio.TimeoutError):
                async with asyncio.timeout(0.1):
                    async with pool.acquire() as _conn2:
                        pass

        await pool.close()


class TestConnectionPoolTransaction:
    """Tests for ConnectionPool.transaction()."""

    async def test_transaction_commits_on_success(self, migrated_db: Path):
        pool = ConnectionPool(migrated_db, pool_size=1)
        await pool.initialize()

        async with pool.transaction() as conn:
            await conn.execute("INSERT INTO products (id, name) VALUES (?, ?)", ("p1", "Flour"))

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT name FROM products WHERE id = 'p1'")
            row = await cursor.fetchone()
            assert row["name"] == "Flour"

        await pool.close()

    async def test_transaction_rolls_back_every_statement(self, migrated_db: Path):
        pool = ConnectionPool(migrated_db, pool_size=1)
        await pool.initialize()

        with pytest.raises(ValueError):
            async with pool.transaction() as conn:
                await conn.execute("INSERT INTO products (id) VALUES ('p1')")
                await conn.execute("INSERT INTO products (id) VALUES ('p2')")
                raise ValueError("Force rollback")

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM products")
            assert (await cursor.fetchone())[0] == 0

        await pool.close()

    async def test_foreign_keys_enforced(self, migrated_db: Path):
        pool = ConnectionPool(migrated_db, pool_size=1)
        await pool.initialize()

        with pytest.raises(aiosqlite.IntegrityError):
            async with pool.transaction() as conn:
                await conn.execute(
                    "INSERT INTO merchandise_receipts (id, purchase_order_id, received_at) "
                    "VALUES ('r1', 'missing', '2024-01-01')"
                )

        await pool.close()


class TestConnectionPoolClose:
    """Tests for ConnectionPool.close()."""

    async def test_close_clears_connections(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=2)
        await pool.initialize()

        await pool.close()

        assert pool._connections == []
        assert pool._initialized is False

    async def test_close_safe_when_not_initialized(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)
        await pool.close()


class TestGlobalPool:
    """Tests for the module-level pool helpers."""

    async def test_get_pool_returns_same_instance(self, mock_settings):
        conn_module._pool = None

        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            pool1 = await get_pool()
            pool2 = await get_pool()

            assert pool1 is pool2
            assert pool1.db_path == mock_settings.storage.db_path
            assert pool1.pool_size == 2

            await close_pool()
            assert conn_module._pool is None

    async def test_close_pool_safe_when_none(self):
        conn_module._pool = None
        await close_pool()

    async def test_get_transaction_commits(self, mock_settings, migrated_db: Path):
        conn_module._pool = None

        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            async with get_transaction() as conn:
                await conn.execute("INSERT INTO purchase_orders (id) VALUES ('PO-1')")

            async with get_connection() as conn:
                cursor = await conn.execute("SELECT status FROM purchase_orders WHERE id = 'PO-1'")
                row = await cursor.fetchone()
                assert row["status"] == "pending"

            await close_pool()
