"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from src.infrastructure.storage.sqlite import ConnectionPool, SQLiteBucketStore
from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> Path:
    """Temporary database with all migrations applied."""
    await initialize_database(temp_db_path)
    return temp_db_path


@pytest.fixture
async def pool(initialized_db: Path) -> AsyncGenerator[ConnectionPool, None]:
    pool = ConnectionPool(initialized_db, pool_size=1)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
def bucket_store(pool: ConnectionPool) -> SQLiteBucketStore:
    return SQLiteBucketStore(pool)
