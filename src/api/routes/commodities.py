"""Commodity endpoints."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import (
    get_add_commodity_use_case,
    get_current_user,
    get_delete_commodity_use_case,
    get_repository,
    get_stock_trend_use_case,
    get_update_commodity_use_case,
    require_admin,
)
from src.application.dto.mappers import commodity_to_response
from src.application.dto.requests import CreateCommodityRequest, UpdateCommodityRequest
from src.application.dto.responses import (
    CommodityChangeResponse,
    CommodityListResponse,
    CommodityResponse,
    ErrorResponse,
    TrendResponse,
)
from src.application.use_cases.add_commodity import AddCommodityUseCase
from src.application.use_cases.delete_commodity import DeleteCommodityUseCase
from src.application.use_cases.get_stock_trend import GetStockTrendUseCase
from src.application.use_cases.update_commodity import UpdateCommodityUseCase
from src.config import get_settings
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.stock_status import StockStatus
from src.core.services.valuation import filter_commodities

router = APIRouter(prefix="/api/commodities", tags=["commodities"])


@router.get("", response_model=CommodityListResponse)
async def list_commodities(
    search: str | None = Query(None, description="Match against name or category"),
    status_filter: StockStatus | None = Query(None, alias="status"),
    repository: InventoryRepository = Depends(get_repository),
    _user: User = Depends(get_current_user),
) -> CommodityListResponse:
    """List commodities, optionally filtered by search term and status."""
    commodities = filter_commodities(
        await repository.list_commodities(), search=search, status=status_filter
    )
    return CommodityListResponse(
        commodities=[commodity_to_response(c) for c in commodities],
        total=len(commodities),
    )


@router.post(
    "",
    response_model=CommodityChangeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def add_commodity(
    request: CreateCommodityRequest,
    user: User = Depends(require_admin),
    use_case: AddCommodityUseCase = Depends(get_add_commodity_use_case),
) -> CommodityChangeResponse:
    """Add a commodity. Admin only."""
    result = await use_case.execute(request, user)
    return use_case.to_response(result)


@router.get(
    "/{commodity_id}",
    response_model=CommodityResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_commodity(
    commodity_id: str,
    repository: InventoryRepository = Depends(get_repository),
    _user: User = Depends(get_current_user),
) -> CommodityResponse:
    """Get one commodity."""
    return commodity_to_response(await repository.get_commodity(commodity_id))


@router.patch(
    "/{commodity_id}",
    response_model=CommodityChangeResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_commodity(
    commodity_id: str,
    request: UpdateCommodityRequest,
    user: User = Depends(require_admin),
    use_case: UpdateCommodityUseCase = Depends(get_update_commodity_use_case),
) -> CommodityChangeResponse:
    """Edit commodity fields. Admin only."""
    result = await use_case.execute(commodity_id, request, user)
    return use_case.to_response(result)


@router.delete(
    "/{commodity_id}",
    response_model=CommodityResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_commodity(
    commodity_id: str,
    user: User = Depends(require_admin),
    use_case: DeleteCommodityUseCase = Depends(get_delete_commodity_use_case),
) -> CommodityResponse:
    """Delete a commodity and its movement history. Admin only."""
    result = await use_case.execute(commodity_id, user)
    return use_case.to_response(result)


@router.get(
    "/{commodity_id}/trend",
    response_model=TrendResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_stock_trend(
    commodity_id: str,
    days: int | None = Query(None, ge=0, le=366, description="Window length in days"),
    _user: User = Depends(get_current_user),
    use_case: GetStockTrendUseCase = Depends(get_stock_trend_use_case),
) -> TrendResponse:
    """Daily stock levels over the trailing window, oldest day first."""
    window = days if days is not None else get_settings().inventory.trend_window_days
    return await use_case.execute(commodity_id, window)
