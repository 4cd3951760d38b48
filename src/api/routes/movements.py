"""Stock movement endpoints."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import (
    get_current_user,
    get_record_movement_use_case,
    get_repository,
    require_admin,
)
from src.application.dto.mappers import movement_to_response
from src.application.dto.requests import RecordMovementRequest
from src.application.dto.responses import (
    ErrorResponse,
    MovementListResponse,
    MovementResultResponse,
)
from src.application.use_cases.record_movement import RecordMovementUseCase
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository

router = APIRouter(prefix="/api/movements", tags=["movements"])


@router.post(
    "",
    response_model=MovementResultResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def record_movement(
    request: RecordMovementRequest,
    user: User = Depends(require_admin),
    use_case: RecordMovementUseCase = Depends(get_record_movement_use_case),
) -> MovementResultResponse:
    """Record an inbound, outbound or adjustment movement. Admin only."""
    result = await use_case.execute(request, user)
    return use_case.to_response(result)


@router.get("", response_model=MovementListResponse)
async def list_movements(
    commodity_id: str | None = Query(None, description="Only this commodity"),
    repository: InventoryRepository = Depends(get_repository),
    _user: User = Depends(get_current_user),
) -> MovementListResponse:
    """Movement history, newest first."""
    movements = await repository.list_movements(commodity_id)
    return MovementListResponse(
        movements=[movement_to_response(m) for m in reversed(movements)],
        total=len(movements),
    )
