"""Daily stock-level trend rebuilt from the movement ledger."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from src.core.entities.commodity import utcnow
from src.core.entities.movement import StockMovement


def stock_trend(
    movements: Iterable[StockMovement],
    commodity_id: str,
    window_days: int = 7,
    now: datetime | None = None,
) -> list[int]:
    """
    Reconstruct one stock level per day for the last ``window_days`` days.

    Day ``i`` covers ``[cutoff + i days, cutoff + i + 1 days)`` where
    ``cutoff = now - window_days``. The level starts at the ``previous_stock``
    of the earliest movement in the window (0 if there is none), takes the
    ``new_stock`` of the last movement of each day, and carries forward
    through days without movements.

    Args:
        movements: Ledger entries, any order, any commodity.
        commodity_id: Commodity to chart.
        window_days: Number of days (and output length).
        now: Reference time, defaults to the current time.

    Returns:
        List of exactly ``window_days`` stock levels, oldest first.
    """
    if window_days <= 0:
        return []

    now = now or utcnow()
    cutoff = now - timedelta(days=window_days)

    relevant = sorted(
        (
            m
            for m in movements
            if m.commodity_id == commodity_id and m.timestamp >= cutoff
        ),
        key=lambda m: m.timestamp,
    )

    level = relevant[0].previous_stock if relevant else 0
    daily: list[int] = []
    idx = 0

    for day in range(window_days):
        day_end = cutoff + timedelta(days=day + 1)
        # relevant is sorted and every entry is >= cutoff, so walking the
        # cursor up to day_end consumes exactly this day's movements
        while idx < len(relevant) and relevant[idx].timestamp < day_end:
            level = relevant[idx].new_stock
            idx += 1
        daily.append(level)

    return daily
