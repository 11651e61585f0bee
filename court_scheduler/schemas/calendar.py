"""Calendar view schemas."""
from enum import Enum
from pydantic import BaseModel
from typing import Optional, List
from datetime import date, time
from uuid import UUID

from court_scheduler.schemas.booking import BookingInDB
from court_scheduler.schemas.court import CourtSummary


class DayInfo(BaseModel):
    """A day column of the week grid."""

    date: date
    closed: bool
    weekend: bool
    holidays: List[str] = []


class GridBooking(BookingInDB):
    """A booking placed on the week grid."""

    row: Optional[int] = None  # Index of the slot matching start_time
    span: int                  # Height in slots
    court_key: UUID
    court_name: str
    color: str


class WeekView(BaseModel):
    """Everything needed to render one schedule week."""

    schedule_id: UUID
    court: CourtSummary
    week_start: date
    week_end: date
    days: List[DayInfo]
    time_slots: List[time]
    bookings: List[GridBooking]
    courts: List[CourtSummary]


class SlotAction(str, Enum):
    """What clicking a grid slot does."""

    NONE = "none"
    CREATE = "create"
    DETAIL = "detail"


class SlotClick(BaseModel):
    """Result of clicking a slot on the week grid."""

    action: SlotAction
    date: date
    time: time
    booking: Optional[BookingInDB] = None
    end_time_options: List[time] = []
