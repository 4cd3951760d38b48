"""Inventory domain: commodities, movements, alerts and the rules over them."""

from src.core import entities, exceptions, interfaces, services

__all__ = ["entities", "exceptions", "interfaces", "services"]
