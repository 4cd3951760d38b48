"""Request DTOs for API endpoints.

Pydantic v2 models for API request parsing. Field rules (required text,
positive prices, threshold ordering) are checked by the domain so every
failure comes back as one field-level message map.
"""

from pydantic import BaseModel, Field

from src.core.entities.movement import MovementType


class CreateCommodityRequest(BaseModel):
    """Request to add a commodity."""

    name: str = Field(default="", description="Commodity name")
    category: str = Field(default="", description="Category, e.g. Raw Materials")
    description: str = Field(default="", description="Free-text description")
    unit: str = Field(default="", description="Unit label, e.g. tons, bags")
    unit_price: float = Field(default=0.0, description="Price per unit")
    current_stock: int = Field(default=0, description="Opening stock level")
    min_threshold: int = Field(default=0, description="Minimum stock threshold")
    max_threshold: int = Field(default=0, description="Maximum stock threshold")
    supplier: str = Field(default="", description="Supplier name")


class UpdateCommodityRequest(BaseModel):
    """Partial commodity edit. Only fields that are set are applied."""

    name: str | None = None
    category: str | None = None
    description: str | None = None
    unit: str | None = None
    unit_price: float | None = None
    current_stock: int | None = None
    min_threshold: int | None = None
    max_threshold: int | None = None
    supplier: str | None = None

    def changes(self) -> dict:
        """Fields the caller actually sent."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class RecordMovementRequest(BaseModel):
    """Request to record a stock movement."""

    commodity_id: str = Field(..., description="Commodity ID")
    movement_type: MovementType = Field(..., description="in, out or adjustment")
    quantity: int = Field(..., description="Units moved, or counted for adjustments")
    reason: str = Field(default="", description="Why the stock changed")


class LoginRequest(BaseModel):
    """Demo login credentials."""

    email: str
    password: str
