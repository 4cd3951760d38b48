"""End-to-end inventory flow over the HTTP API and SQLite storage."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.main import app
from src.application.services import get_inventory_repository, reset_services
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.trend import stock_trend
from src.infrastructure.storage.sqlite import ConnectionPool, SQLiteBucketStore
from src.infrastructure.storage.sqlite.migrations.migrator import initialize_database

ADMIN = {"X-User-Email": "admin@inventory.com"}


@pytest.fixture
async def sqlite_store(tmp_path) -> AsyncGenerator[SQLiteBucketStore, None]:
    db_path = tmp_path / "inventory.db"
    await initialize_database(db_path)
    pool = ConnectionPool(db_path, pool_size=2)
    yield SQLiteBucketStore(pool)
    await pool.close()


@pytest.fixture
async def client(sqlite_store) -> AsyncGenerator[AsyncClient, None]:
    # use cases resolve the same singleton the route dependencies use
    await get_inventory_repository(store=sqlite_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    reset_services()


class TestInventoryFlow:
    async def test_full_cycle_persists(self, client: AsyncClient, sqlite_store):
        created = await client.post(
            "/api/commodities",
            json={
                "name": "Gravel",
                "category": "Raw Materials",
                "unit": "tons",
                "unit_price": 30,
                "current_stock": 400,
                "min_threshold": 100,
                "max_threshold": 800,
                "supplier": "Quarry Co",
            },
            headers=ADMIN,
        )
        assert created.status_code == 201
        gravel_id = created.json()["commodity"]["id"]

        issued = await client.post(
            "/api/movements",
            json={"commodity_id": gravel_id, "movement_type": "out", "quantity": 360},
            headers=ADMIN,
        )
        assert issued.status_code == 201
        assert issued.json()["commodity"]["status"] == "critical"
        assert len(issued.json()["new_alerts"]) == 1

        recount = await client.post(
            "/api/movements",
            json={
                "commodity_id": gravel_id,
                "movement_type": "adjustment",
                "quantity": 150,
                "reason": "Cycle count",
            },
            headers=ADMIN,
        )
        assert recount.json()["commodity"]["status"] == "normal"

        dashboard = (await client.get("/api/dashboard", headers=ADMIN)).json()
        assert dashboard["total_commodities"] == 5
        assert dashboard["recent_alerts"][0]["commodity_id"] == gravel_id

        # a fresh repository sees everything that was written
        reloaded = InventoryRepository(sqlite_store)
        await reloaded.load()
        gravel = await reloaded.get_commodity(gravel_id)
        movements = await reloaded.list_movements(gravel_id)

        assert gravel.current_stock == 150
        assert [m.new_stock for m in movements] == [40, 150]
        assert movements[1].reason == "Cycle count"

        trend = stock_trend(
            movements, gravel_id, 2, now=movements[-1].timestamp + timedelta(seconds=1)
        )
        assert trend == [400, 150]

    async def test_delete_cascades(self, client: AsyncClient, sqlite_store):
        await client.post(
            "/api/movements",
            json={"commodity_id": "3", "movement_type": "in", "quantity": 100},
            headers=ADMIN,
        )

        deleted = await client.delete("/api/commodities/3", headers=ADMIN)
        assert deleted.status_code == 200

        reloaded = InventoryRepository(sqlite_store)
        await reloaded.load()
        assert await reloaded.list_movements("3") == []
        assert any(a.commodity_id == "3" for a in await reloaded.list_alerts())
