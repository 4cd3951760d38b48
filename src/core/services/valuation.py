"""Inventory valuation and aggregation helpers for the dashboard."""

from collections import Counter
from collections.abc import Iterable

from src.core.entities.commodity import Commodity
from src.core.services.stock_status import StockStatus


def total_value(commodities: Iterable[Commodity]) -> float:
    """Sum of current_stock * unit_price across all commodities."""
    return sum((c.current_stock * c.unit_price for c in commodities), 0.0)


def category_histogram(commodities: Iterable[Commodity]) -> dict[str, int]:
    """Number of commodities per category."""
    return dict(Counter(c.category for c in commodities))


def status_histogram(commodities: Iterable[Commodity]) -> dict[StockStatus, int]:
    """Number of commodities per status, with every status present."""
    counts = Counter(c.status for c in commodities)
    return {status: counts.get(status, 0) for status in StockStatus}


def needs_attention(commodities: Iterable[Commodity]) -> list[Commodity]:
    """Commodities that are low or critical."""
    return [
        c
        for c in commodities
        if c.status in (StockStatus.LOW, StockStatus.CRITICAL)
    ]


def filter_commodities(
    commodities: Iterable[Commodity],
    search: str | None = None,
    status: StockStatus | None = None,
) -> list[Commodity]:
    """
    Filter the inventory list.

    ``search`` matches case-insensitively against name or category.
    """
    term = (search or "").strip().lower()
    result = []
    for c in commodities:
        if term and term not in c.name.lower() and term not in c.category.lower():
            continue
        if status is not None and c.status != status:
            continue
        result.append(c)
    return result
