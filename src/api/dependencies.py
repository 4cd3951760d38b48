"""
Dependency injection container for FastAPI.

Provides service instances and the session user to route handlers.
"""

from fastapi import Depends, Request

from src.application.services import get_inventory_repository, get_session_service
from src.application.use_cases import (
    AcknowledgeAlertUseCase,
    AddCommodityUseCase,
    DeleteCommodityUseCase,
    GetDashboardUseCase,
    GetStockTrendUseCase,
    RecordMovementUseCase,
    UpdateCommodityUseCase,
)
from src.config import bind_actor, get_settings
from src.core.entities.user import User
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.session import SessionService


# Repository dependency
async def get_repository() -> InventoryRepository:
    """Get inventory repository."""
    return await get_inventory_repository()


# Session dependencies
def get_sessions() -> SessionService:
    """Get session service."""
    return get_session_service()


async def get_current_user(
    request: Request,
    sessions: SessionService = Depends(get_sessions),
) -> User:
    """Resolve the acting user from the session header."""
    header = get_settings().auth.user_header
    user = sessions.resolve(request.headers.get(header))
    bind_actor(user.email)
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Only admins may change the inventory."""
    SessionService.require_admin(user, "modify inventory")
    return user


# Use case dependencies
def get_add_commodity_use_case() -> AddCommodityUseCase:
    """Get add commodity use case."""
    return AddCommodityUseCase()


def get_update_commodity_use_case() -> UpdateCommodityUseCase:
    """Get update commodity use case."""
    return UpdateCommodityUseCase()


def get_delete_commodity_use_case() -> DeleteCommodityUseCase:
    """Get delete commodity use case."""
    return DeleteCommodityUseCase()


def get_record_movement_use_case() -> RecordMovementUseCase:
    """Get record movement use case."""
    return RecordMovementUseCase()


def get_acknowledge_alert_use_case() -> AcknowledgeAlertUseCase:
    """Get acknowledge alert use case."""
    return AcknowledgeAlertUseCase()


def get_dashboard_use_case() -> GetDashboardUseCase:
    """Get dashboard use case."""
    return GetDashboardUseCase()


def get_stock_trend_use_case() -> GetStockTrendUseCase:
    """Get stock trend use case."""
    return GetStockTrendUseCase()
