"""Update Commodity Use Case: partial edit with full re-validation."""

from src.application.dto.mappers import alert_to_response, commodity_to_response
from src.application.dto.requests import UpdateCommodityRequest
from src.application.dto.responses import CommodityChangeResponse
from src.config import get_logger
from src.core.entities.user import User
from src.core.services.inventory_repository import CommodityChange, InventoryRepository

logger = get_logger(__name__)


class UpdateCommodityUseCase:
    """Edit commodity fields. Status and alerts follow the new values."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(
        self, commodity_id: str, request: UpdateCommodityRequest, actor: User
    ) -> CommodityChange:
        """Execute update commodity use case."""
        changes = request.changes()
        logger.info(
            "update_commodity_started",
            commodity_id=commodity_id,
            fields=sorted(changes),
            actor=actor.email,
        )

        repo = await self._get_repository()
        return await repo.update_commodity(commodity_id, changes)

    def to_response(self, result: CommodityChange) -> CommodityChangeResponse:
        """Convert result to API response."""
        return CommodityChangeResponse(
            commodity=commodity_to_response(result.commodity),
            new_alerts=[alert_to_response(a) for a in result.new_alerts],
        )
