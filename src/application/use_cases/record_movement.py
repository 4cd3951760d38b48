"""Record Movement Use Case: ledger entry, stock update, alert scan."""

from src.application.dto.mappers import (
    alert_to_response,
    commodity_to_response,
    movement_to_response,
)
from src.application.dto.requests import RecordMovementRequest
from src.application.dto.responses import MovementResultResponse
from src.config import get_logger
from src.core.entities.movement import MovementType
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository, MovementResult

logger = get_logger(__name__)


class RecordMovementUseCase:
    """Record an inbound, outbound or adjustment movement."""

    def __init__(self, repository: InventoryRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> InventoryRepository:
        if self._repository is None:
            from src.application.services import get_inventory_repository

            self._repository = await get_inventory_repository()
        return self._repository

    async def execute(self, request: RecordMovementRequest, actor: User) -> MovementResult:
        """Execute record movement use case."""
        logger.info(
            "record_movement_started",
            commodity_id=request.commodity_id,
            type=request.movement_type.value,
            quantity=request.quantity,
        )

        repo = await self._get_repository()
        result = await repo.record_movement(
            commodity_id=request.commodity_id,
            movement_type=request.movement_type,
            quantity=request.quantity,
            reason=request.reason,
            performed_by=actor.name,
        )

        movement = result.movement
        if (
            movement.movement_type == MovementType.OUT
            and -movement.effective_change < movement.quantity
        ):
            logger.info(
                "outbound_clamped",
                commodity_id=request.commodity_id,
                requested=movement.quantity,
                applied=-movement.effective_change,
            )

        return result

    def to_response(self, result: MovementResult) -> MovementResultResponse:
        """Convert result to API response."""
        return MovementResultResponse(
            movement=movement_to_response(result.movement),
            commodity=commodity_to_response(result.commodity),
            new_alerts=[alert_to_response(a) for a in result.new_alerts],
        )
