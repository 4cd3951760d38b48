"""
Service factory functions for dependency injection.

This module wires infrastructure implementations to core services.
Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.core.services.alert_generator import AlertGenerator
from src.core.services.inventory_repository import InventoryRepository
from src.core.services.session import SessionService

if TYPE_CHECKING:
    from src.core.interfaces import IBucketStore


# Singleton service instances
_inventory_repository: InventoryRepository | None = None
_session_service: SessionService | None = None


def get_alert_generator() -> AlertGenerator:
    """Alert generator configured from inventory settings."""
    settings = get_settings().inventory
    return AlertGenerator(
        alert_on_overstock=settings.alert_on_overstock,
        dedup_by_kind=settings.dedup_by_kind,
    )


async def get_inventory_repository(
    store: "IBucketStore | None" = None,
) -> InventoryRepository:
    """
    Get or create the InventoryRepository instance.

    Creates the configured bucket store if not provided.

    Args:
        store: Optional bucket store override

    Returns:
        Loaded InventoryRepository
    """
    global _inventory_repository

    if _inventory_repository is not None and store is None:
        return _inventory_repository

    if store is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage import get_bucket_store

        store = await get_bucket_store()

    repository = InventoryRepository(
        store=store,
        alert_generator=get_alert_generator(),
        seed_demo_data=get_settings().inventory.seed_demo_data,
    )
    await repository.load()

    _inventory_repository = repository
    return repository


def get_session_service() -> SessionService:
    """Get or create the SessionService instance."""
    global _session_service
    if _session_service is None:
        _session_service = SessionService(password=get_settings().auth.demo_password)
    return _session_service


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _inventory_repository, _session_service
    _inventory_repository = None
    _session_service = None
