"""Get Stock Trend Use Case."""

from datetime import datetime

from src.application.dto.responses import TrendResponse
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.trend import stock_trend


class GetStockTrendUseCase:
    """Daily stock levels for one commodity over a trailing window."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(
        self,
        commodity_id: str,
        window_days: int,
        now: datetime | None = None,
    ) -> TrendResponse:
        repo = await self._get_repository()
        # Raises CommodityNotFoundError for unknown ids
        await repo.get_commodity(commodity_id)
        movements = await repo.list_movements(commodity_id)

        return TrendResponse(
            commodity_id=commodity_id,
            window_days=window_days,
            levels=stock_trend(movements, commodity_id, window_days, now=now),
        )
