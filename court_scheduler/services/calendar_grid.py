"""Weekly calendar grid arithmetic.

Pure functions over small in-memory lists: week boundaries, the fixed
15-minute slot sequence, closed-day classification and the mapping of
bookings onto grid rows. Nothing here touches the database.
"""
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

SLOT_MINUTES = 15
DAY_START = time(9, 0)
DAY_END = time(16, 0)  # Final slot and closing boundary

# date.weekday(): Monday is 0, so Friday is 4 and Saturday is 5
CLOSED_WEEKDAYS = frozenset({4, 5})

COURT_PALETTE = ("court-1", "court-2", "court-3", "court-4", "court-5", "court-6")
OWN_COURT_COLOR = "accent"


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def _from_minutes(minutes: int) -> time:
    return time(hour=minutes // 60, minute=minutes % 60)


def week_start(reference: date) -> date:
    """Return the Sunday on or before ``reference``."""
    if isinstance(reference, datetime):
        reference = reference.date()
    # isoweekday(): Monday 1 .. Sunday 7, so Sunday maps to 0 days back
    return reference - timedelta(days=reference.isoweekday() % 7)


def week_end(start: date) -> date:
    return start + timedelta(days=6)


def week_days(start: date) -> List[date]:
    """The 7 dates of the week beginning at ``start``."""
    return [start + timedelta(days=offset) for offset in range(7)]


def time_slots() -> List[time]:
    """Every slot of the bookable day, 09:00 through 16:00 inclusive."""
    return [
        _from_minutes(minutes)
        for minutes in range(_minutes(DAY_START), _minutes(DAY_END) + 1, SLOT_MINUTES)
    ]


def is_slot(value: time) -> bool:
    return value.second == 0 and value.microsecond == 0 and value in time_slots()


def is_weekend(day: date) -> bool:
    return day.weekday() in CLOSED_WEEKDAYS


def holidays_on(day: date, holidays: Iterable) -> list:
    """Holidays falling exactly on ``day``."""
    return [holiday for holiday in holidays if holiday.date == day]


def is_closed(day: date, holidays: Iterable = ()) -> bool:
    """A day is closed on Fridays, Saturdays and holiday dates."""
    return is_weekend(day) or bool(holidays_on(day, holidays))


def end_time_options(start: time) -> List[time]:
    """Valid end times for a booking starting at ``start``.

    Slot boundaries strictly after ``start`` up to the 16:00 closing
    boundary; empty when ``start`` is the last slot.
    """
    return [slot for slot in time_slots() if slot > start]


def slot_span(booking) -> int:
    """Height of a booking in whole slots."""
    return (_minutes(booking.end_time) - _minutes(booking.start_time)) // SLOT_MINUTES


def booking_for_slot(bookings: Iterable, day: date, slot: time):
    """The booking covering ``slot`` on ``day``, or None."""
    for booking in bookings:
        if booking.date != day:
            continue
        if booking.start_time <= slot < booking.end_time:
            return booking
    return None


def booking_position(booking, day: date) -> Optional[Tuple[int, int]]:
    """Grid ``(row, span)`` of a booking drawn in the column for ``day``.

    Returns None when the booking is on another day or its start does not
    fall on a slot boundary.
    """
    if booking.date != day:
        return None
    start = booking.start_time.replace(second=0, microsecond=0)
    slots = time_slots()
    if start not in slots:
        return None
    return slots.index(start), slot_span(booking)


def resolve_slot_click(day: date, slot: time, bookings: Iterable, holidays: Iterable = ()):
    """Decide what clicking ``slot`` on ``day`` does.

    Returns ``("none", None)`` on closed days and on the closing slot, which
    has no end time to offer. Returns ``("detail", booking)`` when a booking
    covers the slot and ``("create", None)`` otherwise.
    """
    if is_closed(day, holidays) or not end_time_options(slot):
        return "none", None
    booking = booking_for_slot(bookings, day, slot)
    if booking is not None:
        return "detail", booking
    return "create", None


def court_color(court_id, sorted_court_ids: Sequence, schedule_court_id=None) -> str:
    """Stable palette entry for a court, keyed by its index in the sorted list."""
    if schedule_court_id is not None and court_id == schedule_court_id:
        return OWN_COURT_COLOR
    try:
        index = list(sorted_court_ids).index(court_id)
    except ValueError:
        index = -1
    # Unknown courts wrap to the last palette entry
    return COURT_PALETTE[index % len(COURT_PALETTE)]
