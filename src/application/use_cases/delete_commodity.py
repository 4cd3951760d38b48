"""Delete Commodity Use Case: removes the commodity and its ledger."""

from src.application.dto.mappers import commodity_to_response
from src.application.dto.responses import CommodityResponse
from src.config import get_logger
from src.core.entities.commodity import Commodity
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository

logger = get_logger(__name__)


class DeleteCommodityUseCase:
    """Delete a commodity. Its movements go with it; alerts stay."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(self, commodity_id: str, actor: User) -> Commodity:
        """Execute delete commodity use case."""
        logger.info("delete_commodity_started", commodity_id=commodity_id, actor=actor.email)
        repo = await self._get_repository()
        return await repo.delete_commodity(commodity_id)

    def to_response(self, result: Commodity) -> CommodityResponse:
        """Convert result to API response."""
        return commodity_to_response(result)
