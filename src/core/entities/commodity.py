"""Commodity domain entity."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, computed_field

from src.core.services.stock_status import StockStatus, classify


def utcnow() -> datetime:
    """Timezone-aware current time used for every entity timestamp."""
    return datetime.now(UTC)


class Commodity(BaseModel):
    """
    A tracked physical stock item.

    ``status`` is derived from the stock level and thresholds on every read
    and cannot be assigned. Any ``status`` key in stored data is ignored.
    """

    id: str
    name: str
    category: str
    description: str = ""
    unit: str
    unit_price: float = Field(ge=0)
    current_stock: int = Field(default=0, ge=0)
    min_threshold: int = Field(ge=0)
    max_threshold: int = Field(ge=0)
    supplier: str = ""
    last_updated: datetime = Field(default_factory=utcnow)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> StockStatus:
        """Current stock status."""
        return classify(self.current_stock, self.min_threshold, self.max_threshold)

    @property
    def total_value(self) -> float:
        """Value of the stock on hand = current_stock * unit_price."""
        return self.current_stock * self.unit_price

    def with_changes(self, **changes: Any) -> "Commodity":
        """
        Return a validated copy with ``changes`` applied.

        ``id`` is fixed and ``last_updated`` is refreshed, so every edit path
        re-derives status from the merged values.
        """
        changes.pop("id", None)
        changes.pop("status", None)
        data = self.model_dump(exclude={"status"})
        data.update(changes)
        data["last_updated"] = changes.get("last_updated") or utcnow()
        return Commodity.model_validate(data)
