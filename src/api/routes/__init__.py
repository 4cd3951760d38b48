"""API route modules."""

from src.api.routes.alerts import router as alerts_router
from src.api.routes.auth import router as auth_router
from src.api.routes.commodities import router as commodities_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.health import router as health_router
from src.api.routes.movements import router as movements_router

__all__ = [
    "health_router",
    "auth_router",
    "commodities_router",
    "movements_router",
    "alerts_router",
    "dashboard_router",
]
