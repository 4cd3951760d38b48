"""
Alert Generator.

Scans commodities after every mutation and raises alerts for stock
conditions that do not already have an open (unacknowledged) alert.
No background scheduler: callers invoke ``scan`` inline.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime

from src.config import get_logger
from src.core.entities.alert import Alert, AlertType
from src.core.entities.commodity import Commodity, utcnow
from src.core.services.stock_status import StockStatus

logger = get_logger(__name__)


_STATUS_ALERTS: dict[StockStatus, tuple[AlertType, str]] = {
    StockStatus.CRITICAL: (AlertType.CRITICAL_STOCK, "is critically low"),
    StockStatus.LOW: (AlertType.LOW_STOCK, "is running low"),
    StockStatus.OVERSTOCKED: (AlertType.OVERSTOCKED, "is overstocked"),
}


def alert_message(commodity: Commodity, phrase: str) -> str:
    """Human-readable alert text, e.g. ``Steel Rods is running low (90 tons)``."""
    return f"{commodity.name} {phrase} ({commodity.current_stock} {commodity.unit})"


class AlertGenerator:
    """
    Layer-pure alert policy.

    By default one open alert per commodity suppresses any new alert for it,
    whatever the kind. ``dedup_by_kind`` narrows that to one open alert per
    (commodity, kind), so a low alert no longer hides a later critical one.
    Overstocked commodities only alert when ``alert_on_overstock`` is set.
    """

    def __init__(
        self,
        alert_on_overstock: bool = False,
        dedup_by_kind: bool = False,
    ) -> None:
        self._alert_on_overstock = alert_on_overstock
        self._dedup_by_kind = dedup_by_kind

    def _alerting_statuses(self) -> set[StockStatus]:
        statuses = {StockStatus.CRITICAL, StockStatus.LOW}
        if self._alert_on_overstock:
            statuses.add(StockStatus.OVERSTOCKED)
        return statuses

    def _open_key(self, commodity_id: str, alert_type: AlertType) -> tuple[str, ...]:
        if self._dedup_by_kind:
            return (commodity_id, alert_type.value)
        return (commodity_id,)

    def scan(
        self,
        commodities: Iterable[Commodity],
        existing_alerts: Sequence[Alert],
        now: datetime | None = None,
    ) -> list[Alert]:
        """
        Return the new alerts raised by the current commodity states.

        Args:
            commodities: Every commodity to evaluate.
            existing_alerts: Alert log; only unacknowledged entries block.
            now: Timestamp for new alerts, defaults to the current time.

        Returns:
            New alerts, possibly empty. ``existing_alerts`` is not modified.
        """
        now = now or utcnow()
        statuses = self._alerting_statuses()

        open_keys = {
            self._open_key(a.commodity_id, a.alert_type)
            for a in existing_alerts
            if not a.acknowledged
        }

        new_alerts: list[Alert] = []
        for commodity in commodities:
            status = commodity.status
            if status not in statuses:
                continue

            alert_type, phrase = _STATUS_ALERTS[status]
            key = self._open_key(commodity.id, alert_type)
            if key in open_keys:
                continue

            alert = Alert(
                id=uuid.uuid4().hex,
                commodity_id=commodity.id,
                alert_type=alert_type,
                message=alert_message(commodity, phrase),
                timestamp=now,
                acknowledged=False,
            )
            new_alerts.append(alert)
            open_keys.add(key)

            logger.info(
                "alert_created",
                alert_id=alert.id,
                commodity_id=commodity.id,
                alert_type=alert_type.value,
            )

        return new_alerts
