"""Get Dashboard Use Case: headline numbers and histograms."""

from dataclasses import dataclass, field

from src.application.dto.mappers import alert_to_response
from src.application.dto.responses import DashboardResponse
from src.core.entities.alert import Alert
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.stock_status import StockStatus
from src.core.services.valuation import (
    category_histogram,
    needs_attention,
    status_histogram,
    total_value,
)


@dataclass
class DashboardSummary:
    """Aggregated view of the inventory."""

    total_commodities: int = 0
    total_value: float = 0.0
    needs_attention: int = 0
    unacknowledged_alerts: int = 0
    categories: dict[str, int] = field(default_factory=dict)
    statuses: dict[StockStatus, int] = field(default_factory=dict)
    recent_alerts: list[Alert] = field(default_factory=list)


class GetDashboardUseCase:
    """Build the dashboard summary."""

    def __init__(
        self,
        repository: InventoryRepository | None = None,
        recent_alerts_limit: int | None = None,
    ):
        self._repository = repository
        self._recent_alerts_limit = recent_alerts_limit

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    def _limit(self) -> int:
        if self._recent_alerts_limit is None:
            from src.config import get_settings

            self._recent_alerts_limit = get_settings().inventory.recent_alerts_limit
        return self._recent_alerts_limit

    async def execute(self) -> DashboardSummary:
        """Execute dashboard use case."""
        repo = await self._get_repository()
        commodities = await repo.list_commodities()
        alerts = await repo.list_alerts()

        newest_first = sorted(alerts, key=lambda a: a.timestamp, reverse=True)

        return DashboardSummary(
            total_commodities=len(commodities),
            total_value=total_value(commodities),
            needs_attention=len(needs_attention(commodities)),
            unacknowledged_alerts=sum(1 for a in alerts if not a.acknowledged),
            categories=category_histogram(commodities),
            statuses=status_histogram(commodities),
            recent_alerts=newest_first[: self._limit()],
        )

    def to_response(self, result: DashboardSummary) -> DashboardResponse:
        """Convert result to API response."""
        return DashboardResponse(
            total_commodities=result.total_commodities,
            total_value=result.total_value,
            needs_attention=result.needs_attention,
            unacknowledged_alerts=result.unacknowledged_alerts,
            categories=result.categories,
            statuses={status.value: count for status, count in result.statuses.items()},
            recent_alerts=[alert_to_response(a) for a in result.recent_alerts],
        )
