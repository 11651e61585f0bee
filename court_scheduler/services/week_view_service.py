"""Week view composition for the public calendar."""
import asyncio
import logging
from datetime import date, time
from typing import List
from uuid import UUID
from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import async_sessionmaker

from court_scheduler.core.exceptions import BookingValidationError, NotFoundError
from court_scheduler.models.booking import Booking
from court_scheduler.models.court import Court
from court_scheduler.models.court_schedule import CourtSchedule
from court_scheduler.models.holiday import Holiday
from court_scheduler.schemas.booking import BookingInDB
from court_scheduler.schemas.calendar import (
    DayInfo,
    GridBooking,
    SlotAction,
    SlotClick,
    WeekView,
)
from court_scheduler.schemas.court import CourtSummary
from court_scheduler.services import calendar_grid
from court_scheduler.services.overlap import resolve_court_key

logger = logging.getLogger(__name__)


class WeekViewService:
    """Builds week grids from bookings, holidays and courts read concurrently."""

    async def _load_schedule(self, session_factory: async_sessionmaker, schedule_id: UUID):
        async with session_factory() as db:
            result = await db.execute(
                select(CourtSchedule).where(CourtSchedule.id == schedule_id)
            )
            schedule = result.scalar_one_or_none()
        if not schedule:
            raise NotFoundError(f"Schedule {schedule_id} not found")
        return schedule

    async def _load_bookings(
        self,
        session_factory: async_sessionmaker,
        schedule_id: UUID,
        from_date: date,
        to_date: date,
    ) -> List[Booking]:
        async with session_factory() as db:
            result = await db.execute(
                select(Booking)
                .where(
                    and_(
                        Booking.schedule_id == schedule_id,
                        Booking.date >= from_date,
                        Booking.date <= to_date,
                    )
                )
                .order_by(Booking.date, Booking.start_time)
            )
            return list(result.scalars().all())

    async def _load_holidays(
        self,
        session_factory: async_sessionmaker,
        from_date: date,
        to_date: date,
    ) -> List[Holiday]:
        async with session_factory() as db:
            result = await db.execute(
                select(Holiday)
                .where(and_(Holiday.date >= from_date, Holiday.date <= to_date))
                .order_by(Holiday.date)
            )
            return list(result.scalars().all())

    async def _load_courts(self, session_factory: async_sessionmaker) -> List[Court]:
        async with session_factory() as db:
            result = await db.execute(select(Court).order_by(Court.name, Court.id))
            return list(result.scalars().all())

    async def get_week_view(
        self,
        session_factory: async_sessionmaker,
        schedule_id: UUID,
        reference_date: date,
    ) -> WeekView:
        """
        Build the week grid containing ``reference_date``.

        The schedule, its bookings, the week's holidays and the court list are
        read concurrently, each on its own session. If any read fails the
        whole view fails.

        Args:
            session_factory: Factory for the per-read sessions
            schedule_id: Schedule to render
            reference_date: Any date inside the wanted week

        Returns:
            The week view, keyed by schedule id and week start
        """
        start = calendar_grid.week_start(reference_date)
        end = calendar_grid.week_end(start)

        schedule, bookings, holidays, courts = await asyncio.gather(
            self._load_schedule(session_factory, schedule_id),
            self._load_bookings(session_factory, schedule_id, start, end),
            self._load_holidays(session_factory, start, end),
            self._load_courts(session_factory),
        )

        days = [
            DayInfo(
                date=day,
                closed=calendar_grid.is_closed(day, holidays),
                weekend=calendar_grid.is_weekend(day),
                holidays=[h.name for h in calendar_grid.holidays_on(day, holidays)],
            )
            for day in calendar_grid.week_days(start)
        ]

        sorted_court_ids = [court.id for court in courts]
        grid_bookings = []
        for booking in bookings:
            position = calendar_grid.booking_position(booking, booking.date)
            if position is None:
                logger.warning(
                    f"Booking {booking.id} starts off the slot grid at {booking.start_time}"
                )
            court_key = resolve_court_key(booking, schedule.court_id)
            grid_bookings.append(
                GridBooking(
                    **BookingInDB.model_validate(booking).model_dump(),
                    row=position[0] if position else None,
                    span=calendar_grid.slot_span(booking),
                    court_key=court_key,
                    court_name=(
                        booking.display_court.name if booking.display_court else schedule.court.name
                    ),
                    color=calendar_grid.court_color(court_key, sorted_court_ids, schedule.court_id),
                )
            )

        return WeekView(
            schedule_id=schedule.id,
            court=CourtSummary.model_validate(schedule.court),
            week_start=start,
            week_end=end,
            days=days,
            time_slots=calendar_grid.time_slots(),
            bookings=grid_bookings,
            courts=[CourtSummary.model_validate(court) for court in courts],
        )

    async def get_slot_click(
        self,
        session_factory: async_sessionmaker,
        schedule_id: UUID,
        day: date,
        slot: time,
    ) -> SlotClick:
        """
        Resolve a click on one grid slot.

        Closed days and the 16:00 closing slot do nothing. A covered slot opens
        the booking, and a free slot opens creation seeded with the date, time
        and end-time choices.
        """
        if not calendar_grid.is_slot(slot):
            raise BookingValidationError(
                "Time must be a 15-minute slot between 09:00 and 16:00"
            )

        _, bookings, holidays = await asyncio.gather(
            self._load_schedule(session_factory, schedule_id),
            self._load_bookings(session_factory, schedule_id, day, day),
            self._load_holidays(session_factory, day, day),
        )

        action, booking = calendar_grid.resolve_slot_click(day, slot, bookings, holidays)
        click = SlotClick(action=SlotAction(action), date=day, time=slot)

        if booking is not None:
            click.booking = BookingInDB.model_validate(booking)
        elif click.action == SlotAction.CREATE:
            click.end_time_options = calendar_grid.end_time_options(slot)

        return click


# Singleton instance
week_view_service = WeekViewService()
