"""Field-level validation for commodity records and stock movements.

Each function returns a ``field -> message`` map; an empty map means valid.
"""

import math
from collections.abc import Collection, Mapping
from typing import Any

_REQUIRED_TEXT = {
    "name": "Name is required",
    "category": "Category is required",
    "unit": "Unit is required",
    "supplier": "Supplier is required",
}


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return float(value)
    return None


def validate_commodity_fields(
    data: Mapping[str, Any], text_fields: Collection[str] | None = None
) -> dict[str, str]:
    """
    Validate a complete commodity record.

    Used both for new commodities and for the merged result of an edit, so
    ``max_threshold > min_threshold`` holds after every change. When
    ``text_fields`` is given, only those required text fields are checked.
    """
    errors: dict[str, str] = {}

    for field, message in _REQUIRED_TEXT.items():
        if text_fields is not None and field not in text_fields:
            continue
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            errors[field] = message

    stock = _number(data.get("current_stock", 0))
    if stock is None or stock != int(stock):
        errors["current_stock"] = "Stock must be a whole number"
    elif stock < 0:
        errors["current_stock"] = "Stock cannot be negative"

    min_threshold = _number(data.get("min_threshold"))
    max_threshold = _number(data.get("max_threshold"))
    if min_threshold is None:
        errors["min_threshold"] = "Min threshold is required"
    elif min_threshold != int(min_threshold):
        errors["min_threshold"] = "Min threshold must be a whole number"
        min_threshold = None
    elif min_threshold < 0:
        errors["min_threshold"] = "Min threshold cannot be negative"

    if max_threshold is None:
        errors["max_threshold"] = "Max threshold is required"
    elif max_threshold != int(max_threshold):
        errors["max_threshold"] = "Max threshold must be a whole number"
    elif min_threshold is not None and max_threshold <= min_threshold:
        errors["max_threshold"] = "Max threshold must be greater than min threshold"

    price = _number(data.get("unit_price"))
    if price is None or price <= 0:
        errors["unit_price"] = "Unit price must be greater than 0"

    return errors


def validate_movement_quantity(quantity: Any) -> dict[str, str]:
    """Movement quantities must be positive whole numbers."""
    value = _number(quantity)
    if value is None or value != int(value):
        return {"quantity": "Quantity must be a whole number"}
    if value <= 0:
        return {"quantity": "Quantity must be greater than 0"}
    return {}
