"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.bucket_store import SQLiteBucketStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)

# Aliases used by the application lifespan
get_connection_pool = get_pool
close_connection_pool = close_pool

# Singleton instance
_bucket_store: SQLiteBucketStore | None = None


async def get_sqlite_bucket_store() -> SQLiteBucketStore:
    """Get singleton SQLite bucket store instance."""
    global _bucket_store
    if _bucket_store is None:
        _bucket_store = SQLiteBucketStore()
    return _bucket_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection_pool",
    "close_connection_pool",
    # Store classes
    "SQLiteBucketStore",
    # Factory functions
    "get_sqlite_bucket_store",
]
