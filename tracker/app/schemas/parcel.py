"""
Parcel Pydantic schemas.

Defines the in-memory parcel record exchanged with the store.
"""

from pydantic import BaseModel, Field, field_validator
from tracker.app.models.parcel_enums import status_value

# SQLite INTEGER is a signed 64-bit value
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Parcel(BaseModel):
    """Schema for a parcel record."""
    number: int = Field(default=0, ge=0, le=INT64_MAX, description="Store-assigned parcel number, 0 until added")
    client: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Owning client identifier")
    status: str = Field(..., description="Lifecycle marker, e.g. 'registered'")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(..., description="RFC3339 creation timestamp")

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        return status_value(value)

    class Config:
        from_attributes = True
