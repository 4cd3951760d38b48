"""Stock movement ledger entity."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.core.entities.commodity import utcnow


class MovementType(str, Enum):
    """Types of stock movements."""

    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"


class StockMovement(BaseModel):
    """Immutable record of a single change to a commodity's stock."""

    model_config = ConfigDict(frozen=True)

    id: str
    commodity_id: str
    movement_type: MovementType
    quantity: int = Field(gt=0)  # as requested, may exceed the real decrease
    reason: str = ""
    performed_by: str = ""
    timestamp: datetime = Field(default_factory=utcnow)
    previous_stock: int = Field(ge=0)
    new_stock: int = Field(ge=0)

    @property
    def effective_change(self) -> int:
        """Signed change actually applied to the stock level."""
        return self.new_stock - self.previous_stock
