"""Court endpoints."""
import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.database import get_db
from court_scheduler.core.security import require_admin
from court_scheduler.models.court import Court
from court_scheduler.models.profile import Profile
from court_scheduler.schemas.court import CourtCreate, CourtUpdate, CourtInDB

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courts", tags=["courts"])


@router.get("", response_model=List[CourtInDB])
async def list_courts(
    db: AsyncSession = Depends(get_db),
):
    """List all courts ordered by name."""
    result = await db.execute(select(Court).order_by(Court.name))
    return result.scalars().all()


@router.post("", response_model=CourtInDB, status_code=201)
async def create_court(
    court: CourtCreate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Create a new court."""
    data = court.model_dump()
    data["description"] = data.get("description") or None

    db_court = Court(**data)
    db.add(db_court)
    await db.commit()
    await db.refresh(db_court)

    logger.info(f"Created court {db_court.name} ({db_court.id})")
    return db_court


@router.get("/{court_id}", response_model=CourtInDB)
async def get_court(
    court_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific court by ID."""
    court = await db.get(Court, court_id)

    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    return court


@router.patch("/{court_id}", response_model=CourtInDB)
async def update_court(
    court_id: UUID,
    court_update: CourtUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Update a court's information.

    Setting ``is_active`` to false hides the court from the public calendar.
    """
    court = await db.get(Court, court_id)

    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    update_data = court_update.model_dump(exclude_unset=True)
    if "description" in update_data:
        update_data["description"] = update_data["description"] or None
    for field, value in update_data.items():
        setattr(court, field, value)

    await db.commit()
    await db.refresh(court)

    logger.info(f"Updated court {court_id}: {sorted(update_data)}")
    return court


@router.delete("/{court_id}", status_code=204)
async def delete_court(
    court_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Delete a court and all associated data.

    Its schedule, the schedule's bookings and bookings displayed under this
    court are deleted with it.
    """
    court = await db.get(Court, court_id)

    if not court:
        raise HTTPException(status_code=404, detail="Court not found")

    await db.delete(court)
    await db.commit()

    logger.info(f"Deleted court {court_id}")
