"""Week grid and slot click tests through the HTTP API."""
import uuid

from sqlalchemy.exc import OperationalError

from court_scheduler.models import Holiday
from court_scheduler.services.week_view_service import week_view_service
from tests.conftest import FRIDAY, MONDAY


async def book(client, schedule, court, start="10:00", end="10:30", day=MONDAY):
    response = await client.post(
        f"/schedules/{schedule.id}/bookings",
        json={
            "display_court_id": str(court.id),
            "date": day.isoformat(),
            "start_time": start,
            "end_time": end,
            "case_number": "W-1",
        },
    )
    assert response.status_code == 201
    return response.json()


async def test_week_view_layout(client, db, court_with_schedule):
    court, other, schedule = court_with_schedule
    db.add(Holiday(name="Founders Day", date=MONDAY.replace(day=7)))
    await db.commit()
    await book(client, schedule, court)
    await book(client, schedule, other, "11:00", "12:00")

    response = await client.get(f"/schedules/{schedule.id}/week", params={"date": "2024-05-08"})
    assert response.status_code == 200
    view = response.json()

    assert view["schedule_id"] == str(schedule.id)
    assert view["week_start"] == "2024-05-05"
    assert view["week_end"] == "2024-05-11"
    assert view["court"]["name"] == "Courtroom A"
    assert [d["date"] for d in view["days"]][0] == "2024-05-05"
    assert [d["closed"] for d in view["days"]] == [False, False, True, False, False, True, True]
    assert view["days"][2]["holidays"] == ["Founders Day"]
    assert view["time_slots"][0] == "09:00:00"
    assert view["time_slots"][-1] == "16:00:00"
    assert [c["name"] for c in view["courts"]] == ["Courtroom A", "Courtroom B"]

    first, second = view["bookings"]
    assert (first["row"], first["span"]) == (4, 2)
    assert isinstance(first["span"], int)
    assert first["color"] == "accent"
    assert first["court_name"] == "Courtroom A"
    assert (second["row"], second["span"]) == (8, 4)
    assert isinstance(second["span"], int)
    assert second["color"] == "court-2"
    assert second["court_key"] == str(other.id)


async def test_week_view_for_unknown_schedule(client):
    response = await client.get(f"/schedules/{uuid.uuid4()}/week", params={"date": "2024-05-06"})

    assert response.status_code == 404


async def test_slot_click_on_friday_is_a_no_op(client, court_with_schedule):
    _, _, schedule = court_with_schedule

    response = await client.get(
        f"/schedules/{schedule.id}/slot", params={"date": FRIDAY.isoformat(), "time": "10:00"}
    )

    assert response.status_code == 200
    assert response.json()["action"] == "none"
    assert response.json()["end_time_options"] == []


async def test_week_view_fails_when_any_read_fails(client, court_with_schedule, monkeypatch):
    court, _, schedule = court_with_schedule
    await book(client, schedule, court)

    async def failing_holidays(*args, **kwargs):
        raise OperationalError("SELECT holidays", {}, Exception("connection reset"))

    monkeypatch.setattr(week_view_service, "_load_holidays", failing_holidays)

    response = await client.get(f"/schedules/{schedule.id}/week", params={"date": "2024-05-06"})

    assert response.status_code == 500
    body = response.json()
    assert body["type"] == "store_error"
    assert "connection reset" in body["detail"]
    assert "bookings" not in body


async def test_slot_click_on_closing_slot_is_a_no_op(client, court_with_schedule):
    _, _, schedule = court_with_schedule

    response = await client.get(
        f"/schedules/{schedule.id}/slot", params={"date": MONDAY.isoformat(), "time": "16:00"}
    )

    assert response.status_code == 200
    assert response.json()["action"] == "none"
    assert response.json()["end_time_options"] == []


async def test_slot_click_on_free_slot_offers_creation(client, court_with_schedule):
    _, _, schedule = court_with_schedule

    response = await client.get(
        f"/schedules/{schedule.id}/slot", params={"date": MONDAY.isoformat(), "time": "15:15"}
    )

    click = response.json()
    assert click["action"] == "create"
    assert click["end_time_options"] == ["15:30:00", "15:45:00", "16:00:00"]


async def test_slot_click_on_booked_slot_opens_detail(client, court_with_schedule):
    court, _, schedule = court_with_schedule
    created = await book(client, schedule, court)

    response = await client.get(
        f"/schedules/{schedule.id}/slot", params={"date": MONDAY.isoformat(), "time": "10:15"}
    )

    click = response.json()
    assert click["action"] == "detail"
    assert click["booking"]["id"] == created["id"]


async def test_slot_click_off_grid_is_rejected(client, court_with_schedule):
    _, _, schedule = court_with_schedule

    response = await client.get(
        f"/schedules/{schedule.id}/slot", params={"date": MONDAY.isoformat(), "time": "10:10"}
    )

    assert response.status_code == 422
