"""Booking lifecycle: validation, overlap-gated creation, reads and deletion."""
import logging
from typing import List
from datetime import date
from uuid import UUID
from sqlalchemy import select, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.exceptions import (
    BookingConflictError,
    BookingValidationError,
    NotFoundError,
)
from court_scheduler.models.booking import Booking
from court_scheduler.models.court import Court
from court_scheduler.models.court_schedule import CourtSchedule
from court_scheduler.models.holiday import Holiday
from court_scheduler.schemas.booking import BookingCreate
from court_scheduler.services import calendar_grid
from court_scheduler.services.overlap import would_overlap

logger = logging.getLogger(__name__)


def validate_booking(data: BookingCreate):
    """
    Check the fields of a proposed booking without touching the store.

    Raises:
        BookingValidationError: On the first rule the booking breaks
    """
    if not data.case_number or not data.case_number.strip():
        raise BookingValidationError("Case number is required")

    if data.display_court_id is None:
        raise BookingValidationError("Display court is required")

    if data.end_time is None:
        raise BookingValidationError("End time is required")

    if not calendar_grid.is_slot(data.start_time):
        raise BookingValidationError(
            "Start time must be a 15-minute slot between 09:00 and 16:00"
        )

    if data.end_time not in calendar_grid.end_time_options(data.start_time):
        raise BookingValidationError(
            "End time must be a slot boundary after the start time and no later than 16:00"
        )


class BookingService:
    """Service for managing bookings."""

    async def get_schedule(self, db: AsyncSession, schedule_id: UUID) -> CourtSchedule:
        result = await db.execute(
            select(CourtSchedule).where(CourtSchedule.id == schedule_id)
        )
        schedule = result.scalar_one_or_none()

        if not schedule:
            raise NotFoundError(f"Schedule {schedule_id} not found")

        return schedule

    async def list_bookings(
        self,
        db: AsyncSession,
        schedule_id: UUID,
        from_date: date,
        to_date: date,
    ) -> List[Booking]:
        """
        List the bookings of a schedule in a date range.

        Args:
            db: Database session
            schedule_id: Owning schedule
            from_date: First date (inclusive)
            to_date: Last date (inclusive)

        Returns:
            Bookings ordered by date and start time, display court expanded
        """
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

    async def get_booking(self, db: AsyncSession, booking_id: UUID) -> Booking:
        result = await db.execute(
            select(Booking)
            .where(Booking.id == booking_id)
            .execution_options(populate_existing=True)
        )
        booking = result.scalar_one_or_none()

        if not booking:
            raise NotFoundError(f"Booking {booking_id} not found")

        return booking

    async def find_conflict_candidates(
        self,
        db: AsyncSession,
        schedule: CourtSchedule,
        court_key: UUID,
        on_date: date,
    ):
        """
        Load the bookings a new booking must not overlap.

        Covers bookings of the target schedule, bookings displayed under the
        candidate court and un-overridden bookings of the candidate court's
        own schedule.

        Returns:
            Tuple of (bookings, court id of each schedule id)
        """
        result = await db.execute(
            select(Booking, CourtSchedule.court_id)
            .join(CourtSchedule, Booking.schedule_id == CourtSchedule.id)
            .where(
                and_(
                    Booking.date == on_date,
                    or_(
                        Booking.schedule_id == schedule.id,
                        Booking.display_court_id == court_key,
                        and_(
                            Booking.display_court_id.is_(None),
                            CourtSchedule.court_id == court_key,
                        ),
                    ),
                )
            )
        )
        rows = result.all()

        bookings = [row[0] for row in rows]
        schedule_courts = {row[0].schedule_id: row[1] for row in rows}
        return bookings, schedule_courts

    async def _is_closed(self, db: AsyncSession, on_date: date) -> bool:
        if calendar_grid.is_weekend(on_date):
            return True
        result = await db.execute(select(Holiday).where(Holiday.date == on_date))
        return calendar_grid.is_closed(on_date, result.scalars().all())

    async def create_booking(
        self,
        db: AsyncSession,
        schedule_id: UUID,
        data: BookingCreate,
    ) -> Booking:
        """
        Validate a proposed booking and persist it.

        The overlap check and the insert are separate round trips, so two
        simultaneous creators can still both succeed.

        Args:
            db: Database session
            schedule_id: Schedule that owns the booked slot
            data: Proposed booking

        Returns:
            The persisted booking, display court expanded

        Raises:
            NotFoundError: If the schedule does not exist
            BookingValidationError: If a field or time choice is invalid
            BookingConflictError: If the booking overlaps an existing one
        """
        schedule = await self.get_schedule(db, schedule_id)

        validate_booking(data)

        if await self._is_closed(db, data.date):
            raise BookingValidationError(f"{data.date.isoformat()} is closed for bookings")

        display_court = await db.get(Court, data.display_court_id)
        if not display_court:
            raise BookingValidationError("Display court not found")

        court_key = data.display_court_id
        existing, schedule_courts = await self.find_conflict_candidates(
            db, schedule, court_key, data.date
        )
        if would_overlap(
            court_key,
            data.date,
            data.start_time,
            data.end_time,
            existing,
            schedule_courts,
        ):
            logger.info(
                f"Rejected overlapping booking on {data.date} "
                f"{data.start_time}-{data.end_time} for court {court_key}"
            )
            raise BookingConflictError()

        booking = Booking(
            schedule_id=schedule.id,
            display_court_id=data.display_court_id,
            date=data.date,
            start_time=data.start_time,
            end_time=data.end_time,
            case_number=data.case_number.strip(),
        )
        db.add(booking)
        await db.commit()

        logger.info(
            f"Created booking {booking.id} on schedule {schedule.id} "
            f"for {booking.date} {booking.start_time}-{booking.end_time}"
        )
        return await self.get_booking(db, booking.id)

    async def delete_booking(self, db: AsyncSession, booking_id: UUID):
        """Hard-delete a booking."""
        booking = await self.get_booking(db, booking_id)

        await db.delete(booking)
        await db.commit()

        logger.info(f"Deleted booking {booking_id}")


# Singleton instance
booking_service = BookingService()
