"""Tests for the add, update and delete commodity use cases."""

import pytest

from src.application.dto.requests import CreateCommodityRequest, UpdateCommodityRequest
from src.application.use_cases import (
    AddCommodityUseCase,
    DeleteCommodityUseCase,
    UpdateCommodityUseCase,
)
from src.core.entities import MovementType
from src.core.exceptions import InventoryValidationError
from src.core.services.inventory_repository import InventoryRepository


@pytest.fixture
async def repository(memory_store):
    repo = InventoryRepository(memory_store)
    await repo.load()
    return repo


class TestAddCommodityUseCase:
    async def test_creates_commodity(self, repository, admin_user, valid_commodity_data):
        use_case = AddCommodityUseCase(repository=repository)

        result = await use_case.execute(CreateCommodityRequest(**valid_commodity_data), admin_user)
        response = use_case.to_response(result)

        assert response.commodity.name == "Copper Wire"
        assert response.commodity.status == "normal"
        assert response.commodity.total_value == pytest.approx(300 * 45.0)
        assert response.new_alerts == []

    async def test_empty_request_reports_every_field(self, repository, admin_user):
        use_case = AddCommodityUseCase(repository=repository)

        with pytest.raises(InventoryValidationError) as exc_info:
            await use_case.execute(CreateCommodityRequest(), admin_user)

        assert {"name", "category", "unit", "supplier", "unit_price", "max_threshold"} <= set(
            exc_info.value.errors
        )


class TestUpdateCommodityUseCase:
    async def test_applies_only_sent_fields(self, repository, admin_user):
        use_case = UpdateCommodityUseCase(repository=repository)
        request = UpdateCommodityRequest(supplier="New Supplier")

        result = await use_case.execute("2", request, admin_user)

        assert result.commodity.supplier == "New Supplier"
        assert result.commodity.name == "Concrete Mix"
        assert result.commodity.current_stock == 200

    async def test_rejects_inverted_thresholds(self, repository, admin_user):
        use_case = UpdateCommodityUseCase(repository=repository)

        with pytest.raises(InventoryValidationError):
            await use_case.execute(
                "2", UpdateCommodityRequest(min_threshold=900, max_threshold=800), admin_user
            )


class TestDeleteCommodityUseCase:
    async def test_deletes_and_returns_commodity(self, repository, admin_user):
        await repository.record_movement("1", MovementType.IN, 10)
        use_case = DeleteCommodityUseCase(repository=repository)

        result = await use_case.execute("1", admin_user)

        assert use_case.to_response(result).name == "Steel Rods"
        assert await repository.list_movements("1") == []
