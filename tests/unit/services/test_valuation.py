"""Tests for valuation and aggregation helpers."""

import pytest

from src.core.services.seed_data import demo_commodities
from src.core.services.stock_status import StockStatus
from src.core.services.valuation import (
    category_histogram,
    filter_commodities,
    needs_attention,
    status_histogram,
    total_value,
)


@pytest.fixture
def commodities():
    return demo_commodities()


class TestTotals:
    def test_total_value(self, commodities):
        expected = 90 * 850 + 200 * 12.5 + 25 * 35 + 850 * 8.99
        assert total_value(commodities) == pytest.approx(expected)

    def test_total_value_empty(self):
        assert total_value([]) == 0.0

    def test_adding_commodity_raises_total_by_its_value(self, commodities, make_commodity):
        extra = make_commodity(id="extra", current_stock=10, unit_price=5.0)

        delta = total_value(commodities + [extra]) - total_value(commodities)

        assert delta == pytest.approx(50.0)


class TestHistograms:
    def test_category_histogram(self, commodities):
        assert category_histogram(commodities) == {
            "Raw Materials": 2,
            "Safety Equipment": 1,
            "Electrical": 1,
        }

    def test_category_histogram_empty(self):
        assert category_histogram([]) == {}

    def test_status_histogram_covers_every_status(self, commodities):
        histogram = status_histogram(commodities)
        assert histogram == {
            StockStatus.CRITICAL: 1,
            StockStatus.LOW: 1,
            StockStatus.NORMAL: 1,
            StockStatus.OVERSTOCKED: 1,
        }

    def test_status_histogram_zero_filled(self):
        histogram = status_histogram([])
        assert set(histogram) == set(StockStatus)
        assert all(count == 0 for count in histogram.values())


class TestNeedsAttention:
    def test_low_and_critical_only(self, commodities):
        names = {c.name for c in needs_attention(commodities)}
        assert names == {"Steel Rods", "Safety Helmets"}


class TestFilterCommodities:
    def test_no_filters_returns_all(self, commodities):
        assert len(filter_commodities(commodities)) == 4

    def test_search_matches_name_case_insensitive(self, commodities):
        result = filter_commodities(commodities, search="helmet")
        assert [c.name for c in result] == ["Safety Helmets"]

    def test_search_matches_category(self, commodities):
        result = filter_commodities(commodities, search="RAW")
        assert {c.name for c in result} == {"Steel Rods", "Concrete Mix"}

    def test_status_filter(self, commodities):
        result = filter_commodities(commodities, status=StockStatus.OVERSTOCKED)
        assert [c.name for c in result] == ["LED Light Bulbs"]

    def test_combined_filters(self, commodities):
        assert filter_commodities(commodities, search="raw", status=StockStatus.CRITICAL) == []
