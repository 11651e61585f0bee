"""Booking endpoints."""
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.database import get_db
from court_scheduler.core.exceptions import NotFoundError
from court_scheduler.core.security import require_admin
from court_scheduler.models.profile import Profile
from court_scheduler.schemas.booking import BookingInDB
from court_scheduler.services.booking_service import booking_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/{booking_id}", response_model=BookingInDB)
async def get_booking(
    booking_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a booking with its display court."""
    try:
        return await booking_service.get_booking(db, booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{booking_id}", status_code=204)
async def delete_booking(
    booking_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Delete a booking.

    Bookings cannot be edited; to change one, delete it and book again.
    """
    try:
        await booking_service.delete_booking(db, booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
