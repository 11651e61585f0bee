"""Holiday schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime, date
from datetime import date as date_type
from uuid import UUID


class HolidayBase(BaseModel):
    """Base holiday schema."""

    name: str = Field(..., min_length=1)
    date: date
    description: Optional[str] = None


class HolidayCreate(HolidayBase):
    """Schema for creating a holiday."""

    pass


class HolidayUpdate(BaseModel):
    """Schema for updating a holiday."""

    name: Optional[str] = Field(default=None, min_length=1)
    date: Optional[date_type] = None
    description: Optional[str] = None

    @field_validator("name", "date")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class HolidayInDB(HolidayBase):
    """Schema for holiday from database."""

    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
