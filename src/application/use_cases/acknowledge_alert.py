"""Acknowledge Alert Use Case."""

from src.application.dto.mappers import alert_to_response
from src.application.dto.responses import AlertResponse
from src.core.entities.alert import Alert
from src.core.services.inventory_repository import InventoryRepository


class AcknowledgeAlertUseCase:
    """Mark an alert as acknowledged. Acknowledging twice is harmless."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(self, alert_id: str) -> Alert:
        repo = await self._get_repository()
        return await repo.acknowledge_alert(alert_id)

    def to_response(self, result: Alert) -> AlertResponse:
        return alert_to_response(result)
