"""Tests for booking overlap detection."""
import uuid
from datetime import date, time
from types import SimpleNamespace

from court_scheduler.services.overlap import intervals_overlap, resolve_court_key, would_overlap

MONDAY = date(2024, 5, 6)
SCHEDULE_ID = uuid.uuid4()
SCHEDULE_COURT = uuid.uuid4()
COURT_K = uuid.uuid4()
OTHER_COURT = uuid.uuid4()


def booking(start, end, display_court_id=COURT_K, day=MONDAY, schedule_id=SCHEDULE_ID):
    return SimpleNamespace(
        date=day,
        start_time=start,
        end_time=end,
        display_court_id=display_court_id,
        schedule_id=schedule_id,
    )


def test_court_key_prefers_display_court():
    assert resolve_court_key(booking(time(10), time(11)), SCHEDULE_COURT) == COURT_K
    assert resolve_court_key(booking(time(10), time(11), display_court_id=None), SCHEDULE_COURT) == SCHEDULE_COURT


def test_touching_intervals_do_not_overlap():
    assert not intervals_overlap(time(10, 30), time(11), time(10), time(10, 30))
    assert not intervals_overlap(time(9, 30), time(10), time(10), time(10, 30))
    assert intervals_overlap(time(10, 15), time(10, 45), time(10), time(10, 30))
    assert intervals_overlap(time(9), time(12), time(10), time(10, 30))


def test_adjacent_booking_is_allowed():
    existing = [booking(time(10), time(10, 30))]

    assert not would_overlap(COURT_K, MONDAY, time(10, 30), time(11), existing)


def test_overlapping_booking_is_rejected():
    existing = [booking(time(10), time(10, 30))]

    assert would_overlap(COURT_K, MONDAY, time(10, 15), time(10, 45), existing)


def test_same_time_on_different_court_is_allowed():
    existing = [booking(time(10), time(10, 30))]

    assert not would_overlap(OTHER_COURT, MONDAY, time(10), time(10, 30), existing)


def test_same_time_on_different_date_is_allowed():
    existing = [booking(time(10), time(10, 30), day=date(2024, 5, 7))]

    assert not would_overlap(COURT_K, MONDAY, time(10), time(10, 30), existing)


def test_booking_without_display_court_counts_against_schedule_court():
    existing = [booking(time(10), time(10, 30), display_court_id=None)]

    assert would_overlap(
        SCHEDULE_COURT, MONDAY, time(10), time(10, 30), existing, {SCHEDULE_ID: SCHEDULE_COURT}
    )
    assert not would_overlap(
        COURT_K, MONDAY, time(10), time(10, 30), existing, {SCHEDULE_ID: SCHEDULE_COURT}
    )
