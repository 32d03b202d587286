"""Pantry schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PantryEntryCreate(BaseModel):
    """Add an ingredient to the pantry (or restock an existing one)."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(..., ge=0)
    unit: str | None = Field(None, max_length=50)
    expires_at: datetime | None = None


class PantryEntryUpdate(BaseModel):
    """Update a pantry entry."""

    name: str | None = Field(None, min_length=1, max_length=255)
    quantity: float | None = Field(None, ge=0)
    unit: str | None = Field(None, max_length=50)
    expires_at: datetime | None = None


class PantryEntryResponse(BaseModel):
    """Pantry entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    normalized_name: str
    quantity: float
    unit: str | None
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime
