"""Fixtures for API tests.

The app runs without its lifespan; every use case and the repository are
overridden with instances bound to one in-memory repository.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import (
    get_acknowledge_alert_use_case,
    get_add_commodity_use_case,
    get_dashboard_use_case,
    get_delete_commodity_use_case,
    get_record_movement_use_case,
    get_repository,
    get_stock_trend_use_case,
    get_update_commodity_use_case,
)
from src.api.main import app
from src.application.use_cases import (
    AcknowledgeAlertUseCase,
    AddCommodityUseCase,
    DeleteCommodityUseCase,
    GetDashboardUseCase,
    GetStockTrendUseCase,
    RecordMovementUseCase,
    UpdateCommodityUseCase,
)
from src.core.services.inventory_repository import InventoryRepository

ADMIN = {"X-User-Email": "admin@inventory.com"}
USER = {"X-User-Email": "user@inventory.com"}


@pytest.fixture
async def repository(memory_store) -> InventoryRepository:
    repo = InventoryRepository(memory_store)
    await repo.load()
    return repo


@pytest.fixture
async def api_client(repository) -> AsyncGenerator[AsyncClient, None]:
    overrides = {
        get_repository: lambda: repository,
        get_add_commodity_use_case: lambda: AddCommodityUseCase(repository=repository),
        get_update_commodity_use_case: lambda: UpdateCommodityUseCase(repository=repository),
        get_delete_commodity_use_case: lambda: DeleteCommodityUseCase(repository=repository),
        get_record_movement_use_case: lambda: RecordMovementUseCase(repository=repository),
        get_acknowledge_alert_use_case: lambda: AcknowledgeAlertUseCase(repository=repository),
        get_dashboard_use_case: lambda: GetDashboardUseCase(
            repository=repository, recent_alerts_limit=5
        ),
        get_stock_trend_use_case: lambda: GetStockTrendUseCase(repository=repository),
    }
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return dict(ADMIN)


@pytest.fixture
def user_headers() -> dict[str, str]:
    return dict(USER)
