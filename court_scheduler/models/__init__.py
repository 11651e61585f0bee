"""Database models."""
from court_scheduler.models.court import Court
from court_scheduler.models.court_schedule import CourtSchedule
from court_scheduler.models.booking import Booking
from court_scheduler.models.holiday import Holiday
from court_scheduler.models.profile import AppRole, Profile, UserRole

__all__ = ["Court", "CourtSchedule", "Booking", "Holiday", "AppRole", "Profile", "UserRole"]
