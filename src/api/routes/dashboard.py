"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_dashboard_use_case
from src.application.dto.responses import DashboardResponse
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.core.entities.user import User

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    _user: User = Depends(get_current_user),
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
) -> DashboardResponse:
    """Headline numbers, histograms and the most recent alerts."""
    result = await use_case.execute()
    return use_case.to_response(result)
