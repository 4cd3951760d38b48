"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.services import (
    get_alert_generator,
    get_inventory_repository,
    get_session_service,
    reset_services,
)
from src.application.use_cases import (
    AcknowledgeAlertUseCase,
    AddCommodityUseCase,
    DeleteCommodityUseCase,
    GetDashboardUseCase,
    GetStockTrendUseCase,
    RecordMovementUseCase,
    UpdateCommodityUseCase,
)

__all__ = [
    # Use Cases
    "AddCommodityUseCase",
    "UpdateCommodityUseCase",
    "DeleteCommodityUseCase",
    "RecordMovementUseCase",
    "AcknowledgeAlertUseCase",
    "GetDashboardUseCase",
    "GetStockTrendUseCase",
    # Service factories
    "get_alert_generator",
    "get_inventory_repository",
    "get_session_service",
    "reset_services",
]
