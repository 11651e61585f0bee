"""Booking schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime, date, time
from uuid import UUID

from court_scheduler.schemas.court import CourtSummary


class BookingCreate(BaseModel):
    """Schema for creating a booking on a schedule.

    ``display_court_id`` and ``case_number`` are optional at the schema level so
    that a missing value is reported by booking validation rather than as a
    request-shape error.
    """

    display_court_id: Optional[UUID] = None
    date: date
    start_time: time
    end_time: Optional[time] = None
    case_number: str = Field(default="", max_length=255)


class BookingInDB(BaseModel):
    """Schema for booking from database."""

    id: UUID
    schedule_id: UUID
    display_court_id: Optional[UUID] = None
    date: date
    start_time: time
    end_time: time
    case_number: str
    created_at: datetime
    updated_at: datetime
    display_court: Optional[CourtSummary] = None

    model_config = ConfigDict(from_attributes=True)
