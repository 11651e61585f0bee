"""Booking overlap detection."""
from datetime import date, time
from typing import Iterable, Mapping, Optional
from uuid import UUID


def resolve_court_key(booking, schedule_court_id: Optional[UUID] = None) -> Optional[UUID]:
    """Court a booking counts against: its display court, else its schedule's court."""
    if booking.display_court_id is not None:
        return booking.display_court_id
    return schedule_court_id


def intervals_overlap(a_start: time, a_end: time, b_start: time, b_end: time) -> bool:
    """Half-open interval intersection; touching endpoints do not overlap."""
    return a_start < b_end and a_end > b_start


def would_overlap(
    candidate_court_key: UUID,
    on_date: date,
    start: time,
    end: time,
    existing_bookings: Iterable,
    schedule_courts: Optional[Mapping[UUID, UUID]] = None,
) -> bool:
    """
    Check a proposed booking against existing ones.

    Args:
        candidate_court_key: Resolved court key of the proposed booking
        on_date: Date of the proposed booking
        start: Proposed start time (inclusive)
        end: Proposed end time (exclusive)
        existing_bookings: Bookings to compare against
        schedule_courts: Court id of each schedule id, used to resolve
            bookings without a display court

    Returns:
        True if any booking on the same date and court key intersects
    """
    schedule_courts = schedule_courts or {}
    for booking in existing_bookings:
        if booking.date != on_date:
            continue
        key = resolve_court_key(booking, schedule_courts.get(booking.schedule_id))
        if key != candidate_court_key:
            continue
        if intervals_overlap(start, end, booking.start_time, booking.end_time):
            return True
    return False
