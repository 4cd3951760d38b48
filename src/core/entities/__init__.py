"""Core domain entities."""

from src.core.entities.alert import Alert, AlertType
from src.core.entities.commodity import Commodity, utcnow
from src.core.entities.movement import MovementType, StockMovement
from src.core.entities.user import DEMO_USERS, User, UserRole
from src.core.services.stock_status import StockStatus

__all__ = [
    # Commodity entities
    "Commodity",
    "StockStatus",
    "utcnow",
    # Ledger entities
    "StockMovement",
    "MovementType",
    # Alert entities
    "Alert",
    "AlertType",
    # Session entities
    "User",
    "UserRole",
    "DEMO_USERS",
]
