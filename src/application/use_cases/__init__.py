"""Application use cases."""

from src.application.use_cases.acknowledge_alert import AcknowledgeAlertUseCase
from src.application.use_cases.add_commodity import AddCommodityUseCase
from src.application.use_cases.delete_commodity import DeleteCommodityUseCase
from src.application.use_cases.get_dashboard import DashboardSummary, GetDashboardUseCase
from src.application.use_cases.get_stock_trend import GetStockTrendUseCase
from src.application.use_cases.record_movement import RecordMovementUseCase
from src.application.use_cases.update_commodity import UpdateCommodityUseCase

__all__ = [
    "AddCommodityUseCase",
    "UpdateCommodityUseCase",
    "DeleteCommodityUseCase",
    "RecordMovementUseCase",
    "AcknowledgeAlertUseCase",
    "GetDashboardUseCase",
    "DashboardSummary",
    "GetStockTrendUseCase",
]
