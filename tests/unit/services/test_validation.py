"""Tests for commodity and movement field validation."""

import pytest

from src.core.services.validation import (
    validate_commodity_fields,
    validate_movement_quantity,
)


class TestValidateCommodityFields:
    def test_valid_record(self, valid_commodity_data):
        assert validate_commodity_fields(valid_commodity_data) == {}

    def test_blank_text_fields(self, valid_commodity_data):
        data = {**valid_commodity_data, "name": "  ", "category": "", "unit": None, "supplier": ""}

        errors = validate_commodity_fields(data)

        assert set(errors) == {"name", "category", "unit", "supplier"}
        assert errors["name"] == "Name is required"

    def test_description_optional(self, valid_commodity_data):
        data = {**valid_commodity_data, "description": ""}
        assert validate_commodity_fields(data) == {}

    def test_missing_stock_defaults_to_zero(self, valid_commodity_data):
        data = dict(valid_commodity_data)
        del data["current_stock"]
        assert validate_commodity_fields(data) == {}

    @pytest.mark.parametrize("stock", [-1, 2.5, "12", True])
    def test_bad_stock(self, valid_commodity_data, stock):
        errors = validate_commodity_fields({**valid_commodity_data, "current_stock": stock})
        assert "current_stock" in errors

    def test_negative_min_threshold(self, valid_commodity_data):
        errors = validate_commodity_fields({**valid_commodity_data, "min_threshold": -5})
        assert errors["min_threshold"] == "Min threshold cannot be negative"

    @pytest.mark.parametrize("max_threshold", [100, 50])
    def test_max_must_exceed_min(self, valid_commodity_data, max_threshold):
        errors = validate_commodity_fields(
            {**valid_commodity_data, "min_threshold": 100, "max_threshold": max_threshold}
        )
        assert errors == {"max_threshold": "Max threshold must be greater than min threshold"}

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("min_threshold", "Min threshold must be a whole number"),
            ("max_threshold", "Max threshold must be a whole number"),
        ],
    )
    def test_fractional_threshold(self, valid_commodity_data, field, message):
        errors = validate_commodity_fields({**valid_commodity_data, field: 150.5})

        assert errors == {field: message}

    def test_text_fields_limits_required_checks(self, valid_commodity_data):
        data = {**valid_commodity_data, "supplier": ""}

        assert validate_commodity_fields(data, text_fields=["name"]) == {}
        assert validate_commodity_fields(data, text_fields=["supplier"]) == {
            "supplier": "Supplier is required"
        }

    def test_missing_thresholds(self, valid_commodity_data):
        data = dict(valid_commodity_data)
        del data["min_threshold"]
        del data["max_threshold"]

        errors = validate_commodity_fields(data)

        assert set(errors) == {"min_threshold", "max_threshold"}

    @pytest.mark.parametrize("price", [0, -3.0, float("nan"), None])
    def test_unit_price_must_be_positive(self, valid_commodity_data, price):
        errors = validate_commodity_fields({**valid_commodity_data, "unit_price": price})
        assert errors == {"unit_price": "Unit price must be greater than 0"}


class TestValidateMovementQuantity:
    def test_valid(self):
        assert validate_movement_quantity(5) == {}

    @pytest.mark.parametrize("quantity", [0, -4])
    def test_not_positive(self, quantity):
        assert validate_movement_quantity(quantity) == {"quantity": "Quantity must be greater than 0"}

    @pytest.mark.parametrize("quantity", [1.5, "3", None, True])
    def test_not_whole(self, quantity):
        assert validate_movement_quantity(quantity) == {"quantity": "Quantity must be a whole number"}
