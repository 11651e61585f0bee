"""API schemas."""
from court_scheduler.schemas.court import (
    CourtCreate,
    CourtUpdate,
    CourtInDB,
    CourtSummary,
)
from court_scheduler.schemas.schedule import (
    ScheduleCreate,
    ScheduleUpdate,
    ScheduleInDB,
)
from court_scheduler.schemas.booking import (
    BookingCreate,
    BookingInDB,
)
from court_scheduler.schemas.holiday import (
    HolidayCreate,
    HolidayUpdate,
    HolidayInDB,
)
from court_scheduler.schemas.profile import (
    ProfileInDB,
    CurrentAdmin,
    RoleGrant,
    UserRoleInDB,
)
from court_scheduler.schemas.calendar import (
    DayInfo,
    GridBooking,
    WeekView,
    SlotAction,
    SlotClick,
)

__all__ = [
    "CourtCreate",
    "CourtUpdate",
    "CourtInDB",
    "CourtSummary",
    "ScheduleCreate",
    "ScheduleUpdate",
    "ScheduleInDB",
    "BookingCreate",
    "BookingInDB",
    "HolidayCreate",
    "HolidayUpdate",
    "HolidayInDB",
    "ProfileInDB",
    "CurrentAdmin",
    "RoleGrant",
    "UserRoleInDB",
    "DayInfo",
    "GridBooking",
    "WeekView",
    "SlotAction",
    "SlotClick",
]
