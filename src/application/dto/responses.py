"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CommodityResponse(BaseModel):
    """Commodity response DTO."""

    id: str
    name: str
    category: str
    description: str
    unit: str
    unit_price: float
    current_stock: int
    min_threshold: int
    max_threshold: int
    supplier: str
    status: str
    total_value: float
    last_updated: datetime


class CommodityListResponse(BaseModel):
    """Commodity list response."""

    commodities: list[CommodityResponse]
    total: int


class StockMovementResponse(BaseModel):
    """Stock movement response DTO."""

    id: str
    commodity_id: str
    movement_type: str
    quantity: int
    effective_change: int
    reason: str
    performed_by: str
    timestamp: datetime
    previous_stock: int
    new_stock: int


class MovementListResponse(BaseModel):
    """Movement ledger response."""

    movements: list[StockMovementResponse]
    total: int


class AlertResponse(BaseModel):
    """Alert response DTO."""

    id: str
    commodity_id: str
    alert_type: str
    message: str
    timestamp: datetime
    acknowledged: bool


class AlertListResponse(BaseModel):
    """Alert log response, newest first."""

    alerts: list[AlertResponse]
    total: int
    unacknowledged: int


class CommodityChangeResponse(BaseModel):
    """Commodity after a create/edit plus alerts raised by it."""

    commodity: CommodityResponse
    new_alerts: list[AlertResponse] = Field(default_factory=list)


class MovementResultResponse(BaseModel):
    """Response for a recorded stock movement."""

    movement: StockMovementResponse
    commodity: CommodityResponse
    new_alerts: list[AlertResponse] = Field(default_factory=list)


class TrendResponse(BaseModel):
    """Daily stock levels, oldest first."""

    commodity_id: str
    window_days: int
    levels: list[int]


class DashboardResponse(BaseModel):
    """Dashboard summary."""

    total_commodities: int
    total_value: float
    needs_attention: int
    unacknowledged_alerts: int
    categories: dict[str, int]
    statuses: dict[str, int]
    recent_alerts: list[AlertResponse]


class UserResponse(BaseModel):
    """Session user."""

    id: str
    name: str
    email: str
    role: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    uptime_seconds: float | None = Field(default=None, description="Uptime")
    storage_backend: str | None = Field(default=None, description="Active storage backend")


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. COMMODITY_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    fields: dict[str, str] | None = Field(
        default=None, description="Per-field validation messages"
    )
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
