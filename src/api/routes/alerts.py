"""Alert endpoints."""

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import (
    get_acknowledge_alert_use_case,
    get_current_user,
    get_repository,
)
from src.application.dto.mappers import alert_to_response
from src.application.dto.responses import AlertListResponse, AlertResponse, ErrorResponse
from src.application.use_cases.acknowledge_alert import AcknowledgeAlertUseCase
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.get("", response_model=AlertListResponse)
async def list_alerts(
    unacknowledged_only: bool = Query(False),
    repository: InventoryRepository = Depends(get_repository),
    _user: User = Depends(get_current_user),
) -> AlertListResponse:
    """Alert log, newest first."""
    alerts = await repository.list_alerts()
    unacknowledged = sum(1 for a in alerts if not a.acknowledged)
    if unacknowledged_only:
        alerts = [a for a in alerts if not a.acknowledged]

    newest_first = sorted(alerts, key=lambda a: a.timestamp, reverse=True)
    return AlertListResponse(
        alerts=[alert_to_response(a) for a in newest_first],
        total=len(newest_first),
        unacknowledged=unacknowledged,
    )


@router.post(
    "/{alert_id}/acknowledge",
    response_model=AlertResponse,
    responses={404: {"model": ErrorResponse}},
)
async def acknowledge_alert(
    alert_id: str,
    _user: User = Depends(get_current_user),
    use_case: AcknowledgeAlertUseCase = Depends(get_acknowledge_alert_use_case),
) -> AlertResponse:
    """Acknowledge an alert."""
    result = await use_case.execute(alert_id)
    return use_case.to_response(result)


@router.post("/scan", response_model=AlertListResponse)
async def scan_alerts(
    repository: InventoryRepository = Depends(get_repository),
    _user: User = Depends(get_current_user),
) -> AlertListResponse:
    """Run the alert scan now and return the alerts it raised."""
    new_alerts = await repository.scan_alerts()
    return AlertListResponse(
        alerts=[alert_to_response(a) for a in new_alerts],
        total=len(new_alerts),
        unacknowledged=len(await repository.list_alerts(unacknowledged_only=True)),
    )
