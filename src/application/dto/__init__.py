"""Data Transfer Objects for API layer.

Request DTOs: Parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CreateCommodityRequest,
    LoginRequest,
    RecordMovementRequest,
    UpdateCommodityRequest,
)
from src.application.dto.responses import (
    AlertListResponse,
    AlertResponse,
    CommodityChangeResponse,
    CommodityListResponse,
    CommodityResponse,
    DashboardResponse,
    ErrorResponse,
    HealthResponse,
    MovementListResponse,
    MovementResultResponse,
    StockMovementResponse,
    TrendResponse,
    UserResponse,
)

__all__ = [
    # Requests
    "CreateCommodityRequest",
    "UpdateCommodityRequest",
    "RecordMovementRequest",
    "LoginRequest",
    # Responses
    "CommodityResponse",
    "CommodityListResponse",
    "CommodityChangeResponse",
    "StockMovementResponse",
    "MovementListResponse",
    "MovementResultResponse",
    "AlertResponse",
    "AlertListResponse",
    "TrendResponse",
    "DashboardResponse",
    "UserResponse",
    "HealthResponse",
    "ErrorResponse",
]
