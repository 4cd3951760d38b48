"""Entity to response DTO conversion."""

from src.application.dto.responses import (
    AlertResponse,
    CommodityResponse,
    StockMovementResponse,
    UserResponse,
)
from src.core.entities import Alert, Commodity, StockMovement, User


def commodity_to_response(commodity: Commodity) -> CommodityResponse:
    return CommodityResponse(
        id=commodity.id,
        name=commodity.name,
        category=commodity.category,
        description=commodity.description,
        unit=commodity.unit,
        unit_price=commodity.unit_price,
        current_stock=commodity.current_stock,
        min_threshold=commodity.min_threshold,
        max_threshold=commodity.max_threshold,
        supplier=commodity.supplier,
        status=commodity.status.value,
        total_value=commodity.total_value,
        last_updated=commodity.last_updated,
    )


def movement_to_response(movement: StockMovement) -> StockMovementResponse:
    return StockMovementResponse(
        id=movement.id,
        commodity_id=movement.commodity_id,
        movement_type=movement.movement_type.value,
        quantity=movement.quantity,
        effective_change=movement.effective_change,
        reason=movement.reason,
        performed_by=movement.performed_by,
        timestamp=movement.timestamp,
        previous_stock=movement.previous_stock,
        new_stock=movement.new_stock,
    )


def alert_to_response(alert: Alert) -> AlertResponse:
    return AlertResponse(
        id=alert.id,
        commodity_id=alert.commodity_id,
        alert_type=alert.alert_type.value,
        message=alert.message,
        timestamp=alert.timestamp,
        acknowledged=alert.acknowledged,
    )


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
    )
