"""Add Commodity Use Case: validated create with status and alert scan."""

from src.application.dto.mappers import alert_to_response, commodity_to_response
from src.application.dto.requests import CreateCommodityRequest
from src.application.dto.responses import CommodityChangeResponse
from src.config import get_logger
from src.core.entities.user import User
from src.core.services.inventory_repository import CommodityChange, InventoryRepository

logger = get_logger(__name__)


class AddCommodityUseCase:
    """Add a commodity to the inventory."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(self, request: CreateCommodityRequest, actor: User) -> CommodityChange:
        """Execute add commodity use case."""
        logger.info("add_commodity_started", name=request.name, actor=actor.email)

        repo = await self._get_repository()
        change = await repo.add_commodity(request.model_dump())

        logger.info(
            "add_commodity_complete",
            commodity_id=change.commodity.id,
            new_alerts=len(change.new_alerts),
        )
        return change

    def to_response(self, result: CommodityChange) -> CommodityChangeResponse:
        """Convert result to API response."""
        return CommodityChangeResponse(
            commodity=commodity_to_response(result.commodity),
            new_alerts=[alert_to_response(a) for a in result.new_alerts],
        )
