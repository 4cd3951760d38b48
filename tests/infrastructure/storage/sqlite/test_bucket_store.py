"""Tests for SQLiteBucketStore."""

import aiosqlite
import pytest

from src.core.entities import MovementType
from src.core.exceptions import DatabaseError
from src.core.services.inventory_repository import InventoryRepository
from src.infrastructure.storage.sqlite import ConnectionPool, SQLiteBucketStore


class TestSQLiteBucketStore:
    async def test_missing_bucket_is_none(self, bucket_store):
        assert await bucket_store.load("commodities") is None

    async def test_save_and_load(self, bucket_store):
        await bucket_store.save("alerts", '[{"id": "a1"}]')
        assert await bucket_store.load("alerts") == '[{"id": "a1"}]'

    async def test_save_replaces_payload(self, bucket_store):
        await bucket_store.save("alerts", "[1]")
        await bucket_store.save("alerts", "[2]")
        assert await bucket_store.load("alerts") == "[2]"

    async def test_buckets_are_independent(self, bucket_store):
        await bucket_store.save("alerts", "[1]")
        await bucket_store.save("movements", "[2]")
        assert await bucket_store.load("alerts") == "[1]"

    async def test_delete(self, bucket_store):
        await bucket_store.save("alerts", "[]")
        await bucket_store.delete("alerts")
        assert await bucket_store.load("alerts") is None

    async def test_delete_missing_is_noop(self, bucket_store):
        await bucket_store.delete("never-saved")

    async def test_payload_written_to_table(self, bucket_store, initialized_db):
        await bucket_store.save("commodities", "[]")

        async with aiosqlite.connect(initialized_db) as conn:
            cursor = await conn.execute("SELECT name, payload, updated_at FROM buckets")
            rows = await cursor.fetchall()

        assert len(rows) == 1
        assert rows[0][0] == "commodities"
        assert rows[0][2]

    async def test_missing_table_raises_database_error(self, tmp_path):
        pool = ConnectionPool(tmp_path / "bare.db", pool_size=1)
        store = SQLiteBucketStore(pool)
        try:
            with pytest.raises(DatabaseError):
                await store.load("commodities")
        finally:
            await pool.close()


class TestRepositoryOverSQLite:
    async def test_state_survives_reload(self, bucket_store):
        repo = InventoryRepository(bucket_store)
        await repo.load()
        await repo.record_movement("2", MovementType.OUT, 150, performed_by="Admin User")

        reloaded = InventoryRepository(bucket_store)
        await reloaded.load()

        assert (await reloaded.get_commodity("2")).current_stock == 50
        movements = await reloaded.list_movements()
        assert len(movements) == 1
        assert movements[0].performed_by == "Admin User"
        assert len(await reloaded.list_alerts()) == 3


class TestSaveMany:
    async def test_writes_every_bucket(self, bucket_store):
        await bucket_store.save_many({"commodities": "[1]", "alerts": "[2]"})

        assert await bucket_store.load("commodities") == "[1]"
        assert await bucket_store.load("alerts") == "[2]"

    async def test_empty_is_noop(self, bucket_store):
        await bucket_store.save_many({})
        assert await bucket_store.load("commodities") is None
