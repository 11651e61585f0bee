"""Schedule and calendar endpoints."""
import logging
from datetime import date, time, timedelta
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from court_scheduler.core.database import get_db, get_session_factory
from court_scheduler.core.exceptions import NotFoundError
from court_scheduler.core.security import require_admin
from court_scheduler.models.court import Court
from court_scheduler.models.court_schedule import CourtSchedule
from court_scheduler.models.profile import Profile
from court_scheduler.schemas.booking import BookingCreate, BookingInDB
from court_scheduler.schemas.calendar import SlotClick, WeekView
from court_scheduler.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleInDB
from court_scheduler.services.booking_service import booking_service
from court_scheduler.services.week_view_service import week_view_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["schedules"])


async def _get_schedule_or_404(db: AsyncSession, schedule_id: UUID) -> CourtSchedule:
    result = await db.execute(
        select(CourtSchedule)
        .where(CourtSchedule.id == schedule_id)
        .execution_options(populate_existing=True)
    )
    schedule = result.scalar_one_or_none()

    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")

    return schedule


@router.get("", response_model=List[ScheduleInDB])
async def list_active_schedules(
    db: AsyncSession = Depends(get_db),
):
    """
    List the schedules shown on the public calendar.

    Only active schedules whose court is also active are returned, ordered
    by court name.
    """
    result = await db.execute(
        select(CourtSchedule)
        .join(Court, CourtSchedule.court_id == Court.id)
        .where(CourtSchedule.is_active.is_(True), Court.is_active.is_(True))
        .order_by(Court.name)
    )
    return result.scalars().all()


@router.post("", response_model=ScheduleInDB, status_code=201)
async def create_schedule(
    schedule: ScheduleCreate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Create the schedule of a court.

    A court has at most one schedule.
    """
    court = await db.get(Court, schedule.court_id)
    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    result = await db.execute(
        select(CourtSchedule).where(CourtSchedule.court_id == schedule.court_id)
    )
    existing_schedule = result.scalar_one_or_none()

    if existing_schedule:
        raise HTTPException(
            status_code=400,
            detail=f"Court {schedule.court_id} already has a schedule (ID: {existing_schedule.id})",
        )

    db_schedule = CourtSchedule(**schedule.model_dump())
    db.add(db_schedule)
    await db.commit()

    logger.info(f"Created schedule {db_schedule.id} for court {court.name}")
    return await _get_schedule_or_404(db, db_schedule.id)


@router.get("/{schedule_id}", response_model=ScheduleInDB)
async def get_schedule(
    schedule_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific schedule with its court."""
    return await _get_schedule_or_404(db, schedule_id)


@router.patch("/{schedule_id}", response_model=ScheduleInDB)
async def update_schedule(
    schedule_id: UUID,
    schedule_update: ScheduleUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Activate or deactivate a schedule."""
    schedule = await _get_schedule_or_404(db, schedule_id)

    update_data = schedule_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(schedule, field, value)

    await db.commit()

    logger.info(f"Updated schedule {schedule_id}: {update_data}")
    return await _get_schedule_or_404(db, schedule_id)


@router.delete("/{schedule_id}", status_code=204)
async def delete_schedule(
    schedule_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Delete a schedule and all of its bookings."""
    schedule = await _get_schedule_or_404(db, schedule_id)

    await db.delete(schedule)
    await db.commit()

    logger.info(f"Deleted schedule {schedule_id}")


@router.get("/{schedule_id}/week", response_model=WeekView)
async def get_week(
    schedule_id: UUID,
    day: date = Query(default=None, alias="date", description="Any date in the week (defaults to today)"),
    session_factory: async_sessionmaker = Depends(get_session_factory),
):
    """
    Get the week grid of a schedule.

    The response carries ``schedule_id`` and ``week_start`` so a client can
    drop a response for a week it has already navigated away from.
    """
    if day is None:
        day = date.today()

    try:
        return await week_view_service.get_week_view(session_factory, schedule_id, day)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{schedule_id}/slot", response_model=SlotClick)
async def click_slot(
    schedule_id: UUID,
    day: date = Query(..., alias="date"),
    slot_time: time = Query(..., alias="time"),
    session_factory: async_sessionmaker = Depends(get_session_factory),
):
    """
    Resolve a click on a grid slot.

    Returns ``none`` on closed days, ``detail`` with the booking covering the
    slot, or ``create`` with the valid end times for a new booking.
    """
    try:
        return await week_view_service.get_slot_click(session_factory, schedule_id, day, slot_time)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{schedule_id}/bookings", response_model=List[BookingInDB])
async def list_schedule_bookings(
    schedule_id: UUID,
    from_date: date = Query(default=None, description="Start date (defaults to today)"),
    to_date: date = Query(default=None, description="End date (defaults to 6 days after start)"),
    db: AsyncSession = Depends(get_db),
):
    """List the bookings of a schedule in a date range."""
    if from_date is None:
        from_date = date.today()
    if to_date is None:
        to_date = from_date + timedelta(days=6)

    if from_date > to_date:
        raise HTTPException(
            status_code=400,
            detail="from_date must be before or equal to to_date",
        )

    await _get_schedule_or_404(db, schedule_id)
    return await booking_service.list_bookings(db, schedule_id, from_date, to_date)


@router.post("/{schedule_id}/bookings", response_model=BookingInDB, status_code=201)
async def create_booking(
    schedule_id: UUID,
    booking: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book a time range on a schedule.

    Open to everyone. Invalid fields are rejected with 422 and overlaps with
    an existing booking for the same court with 409; nothing is written in
    either case.
    """
    try:
        return await booking_service.create_booking(db, schedule_id, booking)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
