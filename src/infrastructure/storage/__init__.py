"""Storage infrastructure implementations."""

from src.config import get_settings
from src.core.interfaces.bucket_store import IBucketStore
from src.infrastructure.storage.memory import InMemoryBucketStore
from src.infrastructure.storage.sqlite import (
    SQLiteBucketStore,
    close_pool,
    get_pool,
    get_sqlite_bucket_store,
)

_memory_store: InMemoryBucketStore | None = None


async def get_bucket_store() -> IBucketStore:
    """Bucket store for the configured storage backend."""
    global _memory_store
    if get_settings().storage.backend == "memory":
        if _memory_store is None:
            _memory_store = InMemoryBucketStore()
        return _memory_store
    return await get_sqlite_bucket_store()


def reset_bucket_store() -> None:
    """Drop the in-memory store (for testing)."""
    global _memory_store
    _memory_store = None


__all__ = [
    # Stores
    "InMemoryBucketStore",
    "SQLiteBucketStore",
    # Connection pool
    "get_pool",
    "close_pool",
    # Factory functions
    "get_bucket_store",
    "get_sqlite_bucket_store",
    "reset_bucket_store",
]
