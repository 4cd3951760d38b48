"""Stock alert entity."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.entities.commodity import utcnow


class AlertType(str, Enum):
    """Condition that raised the alert."""

    LOW_STOCK = "low_stock"
    CRITICAL_STOCK = "critical_stock"
    OVERSTOCKED = "overstocked"


class Alert(BaseModel):
    """
    Notification raised for a commodity's stock condition.

    Alerts are never deleted. Acknowledging is one-way.
    """

    id: str
    commodity_id: str
    alert_type: AlertType
    message: str
    timestamp: datetime = Field(default_factory=utcnow)
    acknowledged: bool = False

    def acknowledge(self) -> "Alert":
        """Return a copy with only ``acknowledged`` set."""
        return self.model_copy(update={"acknowledged": True})
