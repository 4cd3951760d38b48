"""
Inventory repository.

Owns the commodity list, the movement ledger and the alert log, and keeps
them in sync with an injected bucket store. Every commodity mutation
re-derives status (through ``Commodity.with_changes``), re-runs the alert
scan and saves the touched buckets before returning.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.config import get_logger
from src.core.entities.alert import Alert
from src.core.entities.commodity import Commodity, utcnow
from src.core.entities.movement import MovementType, StockMovement
from src.core.exceptions import (
    AlertNotFoundError,
    CommodityNotFoundError,
    InventoryValidationError,
)
from src.core.interfaces.bucket_store import Bucket, IBucketStore
from src.core.services.alert_generator import AlertGenerator
from src.core.services.seed_data import demo_commodities
from src.core.services.validation import (
    validate_commodity_fields,
    validate_movement_quantity,
)

logger = get_logger(__name__)

T = TypeVar("T")

_COMMODITIES = TypeAdapter(list[Commodity])
_MOVEMENTS = TypeAdapter(list[StockMovement])
_ALERTS = TypeAdapter(list[Alert])

EDITABLE_FIELDS = frozenset(
    {
        "name",
        "category",
        "description",
        "unit",
        "unit_price",
        "current_stock",
        "min_threshold",
        "max_threshold",
        "supplier",
    }
)

DEFAULT_REASONS: dict[MovementType, str] = {
    MovementType.IN: "Stock replenishment",
    MovementType.OUT: "Stock consumption",
    MovementType.ADJUSTMENT: "Stock count adjustment",
}


@dataclass
class CommodityChange:
    """A commodity after a mutation plus the alerts that mutation raised."""

    commodity: Commodity
    new_alerts: list[Alert] = field(default_factory=list)


@dataclass
class MovementResult:
    """Outcome of recording a stock movement."""

    movement: StockMovement
    commodity: Commodity
    new_alerts: list[Alert] = field(default_factory=list)


def apply_movement(
    previous_stock: int, movement_type: MovementType, quantity: int
) -> int:
    """
    Stock level after a movement.

    Outbound movements clamp at zero. Adjustments are physical recounts and
    set the level to ``quantity``.
    """
    if movement_type == MovementType.IN:
        return previous_stock + quantity
    if movement_type == MovementType.OUT:
        return max(0, previous_stock - quantity)
    return quantity


class InventoryRepository:
    """
    In-memory owner of the three inventory collections.

    Operations are serialized with a lock so each one runs to completion
    before the next starts.
    """

    def __init__(
        self,
        store: IBucketStore,
        alert_generator: AlertGenerator | None = None,
        seed_demo_data: bool = True,
    ) -> None:
        self._store = store
        self._alert_generator = alert_generator or AlertGenerator()
        self._seed_demo_data = seed_demo_data

        self._commodities: list[Commodity] = []
        self._movements: list[StockMovement] = []
        self._alerts: list[Alert] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """(Re)load all buckets from the store."""
        async with self._lock:
            await self._load()

    async def _load(self) -> None:
        commodities = await self._read(Bucket.COMMODITIES, _COMMODITIES)
        seeded = False
        if commodities is None:
            commodities = demo_commodities() if self._seed_demo_data else []
            seeded = True

        self._commodities = commodities
        self._movements = await self._read(Bucket.MOVEMENTS, _MOVEMENTS) or []
        self._alerts = await self._read(Bucket.ALERTS, _ALERTS) or []
        self._loaded = True

        if seeded:
            await self._save(Bucket.COMMODITIES)

        # Loaded commodities count as changed: raise anything still missing
        if self._scan():
            await self._save(Bucket.ALERTS)

        logger.info(
            "inventory_loaded",
            commodities=len(self._commodities),
            movements=len(self._movements),
            alerts=len(self._alerts),
            seeded=seeded,
        )

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self._load()

    async def _read(self, bucket: Bucket, adapter: TypeAdapter[list[T]]) -> list[T] | None:
        """Decode a bucket; None when it is missing or unreadable."""
        payload = await self._store.load(bucket.value)
        if payload is None:
            return None
        try:
            return adapter.validate_json(payload)
        except ValidationError as e:
            logger.warning(
                "bucket_load_failed",
                bucket=bucket.value,
                errors=e.error_count(),
            )
            return None

    async def _save(self, *buckets: Bucket) -> None:
        payloads: dict[str, str] = {}
        for bucket in buckets:
            if bucket == Bucket.COMMODITIES:
                payload = _COMMODITIES.dump_json(self._commodities)
            elif bucket == Bucket.MOVEMENTS:
                payload = _MOVEMENTS.dump_json(self._movements)
            else:
                payload = _ALERTS.dump_json(self._alerts)
            payloads[bucket.value] = payload.decode("utf-8")
        await self._store.save_many(payloads)

    def _scan(self) -> list[Alert]:
        new_alerts = self._alert_generator.scan(self._commodities, self._alerts)
        self._alerts.extend(new_alerts)
        return new_alerts

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_commodities(self) -> list[Commodity]:
        async with self._lock:
            await self._ensure_loaded()
            return list(self._commodities)

    async def get_commodity(self, commodity_id: str) -> Commodity:
        async with self._lock:
            await self._ensure_loaded()
            return self._find_commodity(commodity_id)[1]

    async def list_movements(self, commodity_id: str | None = None) -> list[StockMovement]:
        """Ledger entries in insertion order, optionally for one commodity."""
        async with self._lock:
            await self._ensure_loaded()
            if commodity_id is None:
                return list(self._movements)
            return [m for m in self._movements if m.commodity_id == commodity_id]

    async def list_alerts(self, unacknowledged_only: bool = False) -> list[Alert]:
        """Alerts in log order."""
        async with self._lock:
            await self._ensure_loaded()
            if unacknowledged_only:
                return [a for a in self._alerts if not a.acknowledged]
            return list(self._alerts)

    def _find_commodity(self, commodity_id: str) -> tuple[int, Commodity]:
        for idx, commodity in enumerate(self._commodities):
            if commodity.id == commodity_id:
                return idx, commodity
        raise CommodityNotFoundError(commodity_id)

    # ------------------------------------------------------------------
    # Commodity mutations
    # ------------------------------------------------------------------

    async def add_commodity(self, data: Mapping[str, Any]) -> CommodityChange:
        """Validate and add a new commodity."""
        values = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
        values.setdefault("current_stock", 0)
        values.setdefault("description", "")

        errors = validate_commodity_fields(values)
        if errors:
            raise InventoryValidationError(errors)

        async with self._lock:
            await self._ensure_loaded()
            commodity = Commodity(id=uuid.uuid4().hex, last_updated=utcnow(), **values)
            self._commodities.append(commodity)
            new_alerts = self._scan()
            await self._save(Bucket.COMMODITIES, Bucket.ALERTS)

        logger.info(
            "commodity_added",
            commodity_id=commodity.id,
            name=commodity.name,
            status=commodity.status.value,
        )
        return CommodityChange(commodity=commodity, new_alerts=new_alerts)

    async def update_commodity(
        self, commodity_id: str, changes: Mapping[str, Any]
    ) -> CommodityChange:
        """
        Edit commodity fields.

        The merged record is validated as a whole, so threshold edits that
        break ``max_threshold > min_threshold`` are rejected. Required text
        fields are only checked when the edit touches them.
        """
        unknown = sorted(set(changes) - EDITABLE_FIELDS)
        if unknown:
            raise InventoryValidationError(
                {name: "Field cannot be edited" for name in unknown}
            )

        async with self._lock:
            await self._ensure_loaded()
            idx, current = self._find_commodity(commodity_id)

            merged = current.model_dump(exclude={"status", "id", "last_updated"})
            merged.update(changes)
            errors = validate_commodity_fields(merged, text_fields=changes.keys())
            if errors:
                raise InventoryValidationError(errors)

            updated = current.with_changes(**dict(changes))
            self._commodities[idx] = updated
            new_alerts = self._scan()
            await self._save(Bucket.COMMODITIES, Bucket.ALERTS)

        logger.info(
            "commodity_updated",
            commodity_id=commodity_id,
            fields=sorted(changes),
            status=updated.status.value,
        )
        return CommodityChange(commodity=updated, new_alerts=new_alerts)

    async def delete_commodity(self, commodity_id: str) -> Commodity:
        """Delete a commodity and its movements. Alerts are kept."""
        async with self._lock:
            await self._ensure_loaded()
            idx, commodity = self._find_commodity(commodity_id)
            del self._commodities[idx]

            before = len(self._movements)
            self._movements = [
                m for m in self._movements if m.commodity_id != commodity_id
            ]
            await self._save(Bucket.COMMODITIES, Bucket.MOVEMENTS)

        logger.info(
            "commodity_deleted",
            commodity_id=commodity_id,
            movements_removed=before - len(self._movements),
        )
        return commodity

    # ------------------------------------------------------------------
    # Movement ledger
    # ------------------------------------------------------------------

    def _next_timestamp(self) -> datetime:
        """Current time, never earlier than the last ledger entry."""
        now = utcnow()
        if self._movements and self._movements[-1].timestamp > now:
            return self._movements[-1].timestamp
        return now

    async def record_movement(
        self,
        commodity_id: str,
        movement_type: MovementType,
        quantity: int,
        reason: str = "",
        performed_by: str = "",
    ) -> MovementResult:
        """
        Append a ledger entry and apply it to the commodity.

        ``quantity`` is stored as requested. For clamped outbound movements
        the real decrease is ``movement.effective_change``.
        """
        errors = validate_movement_quantity(quantity)
        if errors:
            raise InventoryValidationError(errors)

        async with self._lock:
            await self._ensure_loaded()
            idx, commodity = self._find_commodity(commodity_id)

            previous_stock = commodity.current_stock
            new_stock = apply_movement(previous_stock, movement_type, int(quantity))
            timestamp = self._next_timestamp()

            movement = StockMovement(
                id=uuid.uuid4().hex,
                commodity_id=commodity_id,
                movement_type=movement_type,
                quantity=int(quantity),
                reason=reason.strip() or DEFAULT_REASONS[movement_type],
                performed_by=performed_by,
                timestamp=timestamp,
                previous_stock=previous_stock,
                new_stock=new_stock,
            )
            self._movements.append(movement)

            updated = commodity.with_changes(current_stock=new_stock, last_updated=timestamp)
            self._commodities[idx] = updated
            new_alerts = self._scan()
            await self._save(Bucket.MOVEMENTS, Bucket.COMMODITIES, Bucket.ALERTS)

        logger.info(
            "stock_movement_recorded",
            movement_id=movement.id,
            commodity_id=commodity_id,
            type=movement_type.value,
            qty=movement.quantity,
            previous_stock=previous_stock,
            new_stock=new_stock,
            status=updated.status.value,
        )
        return MovementResult(movement=movement, commodity=updated, new_alerts=new_alerts)

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------

    async def acknowledge_alert(self, alert_id: str) -> Alert:
        """Mark one alert acknowledged, keeping its position in the log."""
        async with self._lock:
            await self._ensure_loaded()
            for idx, alert in enumerate(self._alerts):
                if alert.id == alert_id:
                    if not alert.acknowledged:
                        self._alerts[idx] = alert.acknowledge()
                        await self._save(Bucket.ALERTS)
                        logger.info("alert_acknowledged", alert_id=alert_id)
                    return self._alerts[idx]
        raise AlertNotFoundError(alert_id)

    async def scan_alerts(self) -> list[Alert]:
        """Run the alert scan on demand."""
        async with self._lock:
            await self._ensure_loaded()
            new_alerts = self._scan()
            if new_alerts:
                await self._save(Bucket.ALERTS)
            return new_alerts
