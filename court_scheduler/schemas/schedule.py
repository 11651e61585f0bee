"""Court schedule schemas."""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from court_scheduler.schemas.court import CourtSummary


class ScheduleCreate(BaseModel):
    """Schema for creating a schedule for a court."""

    court_id: UUID
    is_active: bool = True


class ScheduleUpdate(BaseModel):
    """Schema for updating a schedule."""

    is_active: Optional[bool] = None

    @field_validator("is_active")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ScheduleInDB(BaseModel):
    """Schema for schedule from database, court expanded."""

    id: UUID
    court_id: UUID
    is_active: bool
    created_at: datetime
    updated_at: datetime
    court: CourtSummary

    model_config = ConfigDict(from_attributes=True)
