"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from src.application.services import reset_services
from src.config import reset_settings
from src.core.entities import Commodity, User
from src.core.entities.user import DEMO_USERS
from src.infrastructure.storage import InMemoryBucketStore, reset_bucket_store


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against the memory backend with default rules."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("INVENTORY_SEED_DEMO_DATA", "true")
    monkeypatch.setenv("INVENTORY_ALERT_ON_OVERSTOCK", "false")
    monkeypatch.setenv("INVENTORY_DEDUP_BY_KIND", "false")
    reset_settings()
    reset_services()
    reset_bucket_store()
    yield
    reset_settings()
    reset_services()
    reset_bucket_store()


@pytest.fixture
def admin_user() -> User:
    return DEMO_USERS[0]


@pytest.fixture
def regular_user() -> User:
    return DEMO_USERS[1]


@pytest.fixture
def memory_store() -> InMemoryBucketStore:
    return InMemoryBucketStore()


@pytest.fixture
def make_commodity():
    """Factory for commodities with sensible defaults."""

    def _make(**overrides) -> Commodity:
        data = {
            "id": "c1",
            "name": "Steel Rods",
            "category": "Raw Materials",
            "unit": "tons",
            "unit_price": 850.0,
            "current_stock": 200,
            "min_threshold": 100,
            "max_threshold": 500,
            "supplier": "SteelCorp Industries",
        }
        data.update(overrides)
        return Commodity(**data)

    return _make


@pytest.fixture
def valid_commodity_data() -> dict:
    """Payload for a new, normally stocked commodity."""
    return {
        "name": "Copper Wire",
        "category": "Electrical",
        "description": "2.5mm copper wire",
        "unit": "rolls",
        "unit_price": 45.0,
        "current_stock": 300,
        "min_threshold": 100,
        "max_threshold": 600,
        "supplier": "WireWorks Ltd",
    }
