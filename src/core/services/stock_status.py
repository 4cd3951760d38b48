"""Stock status classification.

A commodity's status is a pure function of its stock level and thresholds.
Nothing else may set it.
"""

from enum import Enum


class StockStatus(str, Enum):
    """Health of a commodity's stock level."""

    CRITICAL = "critical"
    LOW = "low"
    NORMAL = "normal"
    OVERSTOCKED = "overstocked"


# Stock at or below this fraction of the minimum threshold is critical.
CRITICAL_RATIO = 0.5


def classify(
    current_stock: float, min_threshold: float, max_threshold: float
) -> StockStatus:
    """
    Classify a stock level against its thresholds.

    Rules are checked in order and the first match wins, so a level that is
    both below the minimum and above the maximum (bad thresholds) reports
    the shortage.
    """
    if current_stock <= min_threshold * CRITICAL_RATIO:
        return StockStatus.CRITICAL
    if current_stock <= min_threshold:
        return StockStatus.LOW
    if current_stock >= max_threshold:
        return StockStatus.OVERSTOCKED
    return StockStatus.NORMAL
