"""Demonstration commodities loaded on first run.

One commodity per stock status so every dashboard widget has data.
"""

from src.core.entities.commodity import Commodity, utcnow


def demo_commodities() -> list[Commodity]:
    """Fresh copies of the demonstration set."""
    now = utcnow()
    return [
        Commodity(
            id="1",
            name="Steel Rods",
            category="Raw Materials",
            description="10mm steel reinforcement rods",
            current_stock=90,
            min_threshold=100,
            max_threshold=500,
            unit="tons",
            unit_price=850,
            supplier="SteelCorp Industries",
            last_updated=now,
        ),
        Commodity(
            id="2",
            name="Concrete Mix",
            category="Raw Materials",
            description="High-grade concrete mix for construction",
            current_stock=200,
            min_threshold=150,
            max_threshold=1000,
            unit="bags",
            unit_price=12.50,
            supplier="BuildMaster Supplies",
            last_updated=now,
        ),
        Commodity(
            id="3",
            name="Safety Helmets",
            category="Safety Equipment",
            description="OSHA-compliant safety helmets",
            current_stock=25,
            min_threshold=50,
            max_threshold=200,
            unit="pieces",
            unit_price=35,
            supplier="SafetyFirst Equipment",
            last_updated=now,
        ),
        Commodity(
            id="4",
            name="LED Light Bulbs",
            category="Electrical",
            description="60W equivalent LED bulbs",
            current_stock=850,
            min_threshold=100,
            max_threshold=500,
            unit="pieces",
            unit_price=8.99,
            supplier="BrightLights Co.",
            last_updated=now,
        ),
    ]
