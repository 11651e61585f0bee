"""Court schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class CourtBase(BaseModel):
    """Base court schema."""

    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    description: Optional[str] = None


class CourtCreate(CourtBase):
    """Schema for creating a court."""

    is_active: bool = True


class CourtUpdate(BaseModel):
    """Schema for updating a court."""

    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "location", "is_active")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class CourtSummary(BaseModel):
    """Court fields shown alongside schedules and bookings."""

    id: UUID
    name: str
    location: str

    model_config = ConfigDict(from_attributes=True)


class CourtInDB(CourtBase):
    """Schema for court from database."""

    id: UUID
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
