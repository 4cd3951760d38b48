"""
Domain exceptions for the inventory service.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InventoryError(Exception):
    """Base exception for all inventory service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class InventoryValidationError(InventoryError):
    """One or more fields failed validation.

    ``errors`` maps field name to a human-readable message, mirroring what a
    form shows next to each input.
    """

    def __init__(self, errors: dict[str, str]):
        fields = ", ".join(sorted(errors))
        super().__init__(
            f"Validation failed for: {fields}",
            code="VALIDATION_ERROR",
            details={"fields": dict(errors)},
        )
        self.errors = dict(errors)


# Lookup Exceptions
class CommodityNotFoundError(InventoryError):
    """Commodity not found."""

    def __init__(self, commodity_id: str):
        super().__init__(
            f"Commodity not found: {commodity_id}",
            code="COMMODITY_NOT_FOUND",
            details={"commodity_id": commodity_id},
        )


class AlertNotFoundError(InventoryError):
    """Alert not found."""

    def __init__(self, alert_id: str):
        super().__init__(
            f"Alert not found: {alert_id}",
            code="ALERT_NOT_FOUND",
            details={"alert_id": alert_id},
        )


# Storage Exceptions
class StorageError(InventoryError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Session Exceptions
class AuthenticationError(InventoryError):
    """Credentials or session header did not identify a known user."""

    def __init__(self, reason: str = "Invalid email or password"):
        super().__init__(
            reason,
            code="AUTHENTICATION_FAILED",
        )


class PermissionDeniedError(InventoryError):
    """Actor lacks the role required for the action."""

    def __init__(self, action: str, required_role: str = "admin"):
        super().__init__(
            f"Role '{required_role}' is required to {action}",
            code="PERMISSION_DENIED",
            details={"action": action, "required_role": required_role},
        )


class ConfigurationError(InventoryError):
    """Configuration error."""

    pass
