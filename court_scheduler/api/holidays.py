"""Holiday endpoints."""
import logging
from datetime import date
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.database import get_db
from court_scheduler.core.security import require_admin
from court_scheduler.models.holiday import Holiday
from court_scheduler.models.profile import Profile
from court_scheduler.schemas.holiday import HolidayCreate, HolidayUpdate, HolidayInDB

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=List[HolidayInDB])
async def list_holidays(
    from_date: date = Query(default=None, description="First date (inclusive)"),
    to_date: date = Query(default=None, description="Last date (inclusive)"),
    db: AsyncSession = Depends(get_db),
):
    """List holidays, optionally limited to a date range."""
    query = select(Holiday).order_by(Holiday.date)
    if from_date is not None:
        query = query.where(Holiday.date >= from_date)
    if to_date is not None:
        query = query.where(Holiday.date <= to_date)

    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=HolidayInDB, status_code=201)
async def create_holiday(
    holiday: HolidayCreate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Create a holiday; no court can be booked on its date."""
    db_holiday = Holiday(**holiday.model_dump())
    db.add(db_holiday)
    await db.commit()
    await db.refresh(db_holiday)

    logger.info(f"Created holiday {db_holiday.name} on {db_holiday.date}")
    return db_holiday


@router.patch("/{holiday_id}", response_model=HolidayInDB)
async def update_holiday(
    holiday_id: UUID,
    holiday_update: HolidayUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Update a holiday."""
    holiday = await db.get(Holiday, holiday_id)

    if not holiday:
        raise HTTPException(status_code=404, detail="Holiday not found")

    update_data = holiday_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(holiday, field, value)

    await db.commit()
    await db.refresh(holiday)

    return holiday


@router.delete("/{holiday_id}", status_code=204)
async def delete_holiday(
    holiday_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Delete a holiday."""
    holiday = await db.get(Holiday, holiday_id)

    if not holiday:
        raise HTTPException(status_code=404, detail="Holiday not found")

    await db.delete(holiday)
    await db.commit()

    logger.info(f"Deleted holiday {holiday_id}")
