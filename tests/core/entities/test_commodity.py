"""Tests for Commodity entity."""

from datetime import UTC, datetime, timedelta

import pytest

from src.core.entities import Commodity, StockStatus


class TestCommodityStatus:
    def test_status_derived_from_stock(self, make_commodity):
        assert make_commodity(current_stock=40).status == StockStatus.CRITICAL
        assert make_commodity(current_stock=90).status == StockStatus.LOW
        assert make_commodity(current_stock=200).status == StockStatus.NORMAL
        assert make_commodity(current_stock=500).status == StockStatus.OVERSTOCKED

    def test_status_is_serialized(self, make_commodity):
        data = make_commodity(current_stock=40).model_dump(mode="json")
        assert data["status"] == "critical"

    def test_stored_status_is_ignored(self, make_commodity):
        data = make_commodity(current_stock=40).model_dump(mode="json")
        data["status"] = "normal"

        loaded = Commodity.model_validate(data)

        assert loaded.status == StockStatus.CRITICAL

    def test_status_cannot_be_assigned(self, make_commodity):
        commodity = make_commodity()
        with pytest.raises((AttributeError, ValueError)):
            commodity.status = StockStatus.CRITICAL  # type: ignore[misc]


class TestCommodityFields:
    def test_total_value(self, make_commodity):
        commodity = make_commodity(current_stock=10, unit_price=12.5)
        assert commodity.total_value == 125.0

    def test_negative_stock_rejected(self, make_commodity):
        with pytest.raises(ValueError):
            make_commodity(current_stock=-1)

    def test_last_updated_is_timezone_aware(self, make_commodity):
        assert make_commodity().last_updated.tzinfo is not None


class TestWithChanges:
    def test_rederives_status(self, make_commodity):
        commodity = make_commodity(current_stock=200)

        updated = commodity.with_changes(current_stock=30)

        assert updated.status == StockStatus.CRITICAL
        assert commodity.status == StockStatus.NORMAL

    def test_threshold_change_rederives_status(self, make_commodity):
        commodity = make_commodity(current_stock=200)

        updated = commodity.with_changes(min_threshold=250, max_threshold=800)

        assert updated.status == StockStatus.LOW

    def test_id_and_status_keys_ignored(self, make_commodity):
        commodity = make_commodity(id="keep-me")

        updated = commodity.with_changes(id="other", status="overstocked", name="Rebar")

        assert updated.id == "keep-me"
        assert updated.name == "Rebar"
        assert updated.status == StockStatus.NORMAL

    def test_refreshes_last_updated(self, make_commodity):
        old = datetime.now(UTC) - timedelta(days=3)
        commodity = make_commodity(last_updated=old)

        updated = commodity.with_changes(description="new")

        assert updated.last_updated > old

    def test_explicit_last_updated(self, make_commodity):
        stamp = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        updated = make_commodity().with_changes(current_stock=10, last_updated=stamp)
        assert updated.last_updated == stamp
