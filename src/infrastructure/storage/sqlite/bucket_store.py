"""SQLite implementation of bucket storage."""

from collections.abc import Mapping
from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.exceptions import DatabaseError
from src.core.interfaces.bucket_store import IBucketStore
from src.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)

_UPSERT = """
    INSERT INTO buckets (name, payload, updated_at)
    VALUES (?, ?, ?)
    ON CONFLICT(name) DO UPDATE SET
        payload = excluded.payload,
        updated_at = excluded.updated_at
"""


class SQLiteBucketStore(IBucketStore):
    """Stores each bucket as one row of the ``buckets`` table."""

    def __init__(self, pool: ConnectionPool | None = None):
        self._pool = pool

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def load(self, bucket: str) -> str | None:
        """Return the stored payload for ``bucket``."""
        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                cursor = await conn.execute(
                    "SELECT payload FROM buckets WHERE name = ?", (bucket,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("load", str(e)) from e

        if row is None:
            return None
        return row["payload"]

    async def save(self, bucket: str, payload: str) -> None:
        """Insert or replace the bucket's payload."""
        await self.save_many({bucket: payload})

    async def save_many(self, payloads: Mapping[str, str]) -> None:
        """Write every bucket in one transaction."""
        if not payloads:
            return

        pool = await self._get_pool()
        updated_at = datetime.now(UTC).isoformat()
        try:
            async with pool.transaction() as conn:
                await conn.executemany(
                    _UPSERT,
                    [(name, payload, updated_at) for name, payload in payloads.items()],
                )
        except aiosqlite.Error as e:
            raise DatabaseError("save", str(e)) from e

        logger.debug(
            "buckets_saved",
            buckets=sorted(payloads),
            size=sum(len(p) for p in payloads.values()),
        )

    async def delete(self, bucket: str) -> None:
        """Remove the bucket's row."""
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                await conn.execute("DELETE FROM buckets WHERE name = ?", (bucket,))
        except aiosqlite.Error as e:
            raise DatabaseError("delete", str(e)) from e

        logger.info("bucket_deleted", bucket=bucket)
