"""Admin endpoints: management listings and admin identity."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select, or_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.database import get_db
from court_scheduler.core.security import require_admin
from court_scheduler.models.court import Court
from court_scheduler.models.court_schedule import CourtSchedule
from court_scheduler.models.profile import Profile, UserRole
from court_scheduler.schemas.court import CourtInDB, CourtSummary
from court_scheduler.schemas.profile import CurrentAdmin, ProfileInDB, RoleGrant, UserRoleInDB
from court_scheduler.schemas.schedule import ScheduleInDB

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("", response_model=CurrentAdmin)
async def admin_home(
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Admin entry point.

    Browsers without a session are redirected to the login page.
    """
    return await get_me(db, admin)


@router.get("/me", response_model=CurrentAdmin)
async def get_me(
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """Get the signed-in admin's profile and roles."""
    result = await db.execute(select(UserRole.role).where(UserRole.user_id == admin.id))
    roles = result.scalars().all()

    return CurrentAdmin(
        **ProfileInDB.model_validate(admin).model_dump(),
        roles=list(roles),
    )


@router.get("/courts", response_model=List[CourtInDB])
async def list_all_courts(
    search: Optional[str] = Query(default=None, description="Filter on name, location or description"),
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """List every court, newest first, including inactive ones."""
    query = select(Court).order_by(Court.created_at.desc())

    if search:
        pattern = f"%{search.lower()}%"
        query = query.where(
            or_(
                func.lower(Court.name).like(pattern),
                func.lower(Court.location).like(pattern),
                func.lower(func.coalesce(Court.description, "")).like(pattern),
            )
        )

    result = await db.execute(query)
    return result.scalars().all()


@router.get("/schedules", response_model=List[ScheduleInDB])
async def list_all_schedules(
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """List every schedule, newest first, including inactive ones."""
    result = await db.execute(
        select(CourtSchedule).order_by(CourtSchedule.created_at.desc())
    )
    return result.scalars().all()


@router.get("/schedules/available-courts", response_model=List[CourtSummary])
async def list_courts_without_schedule(
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """List the courts a new schedule can still be created for."""
    scheduled = select(CourtSchedule.court_id)
    result = await db.execute(
        select(Court).where(Court.id.not_in(scheduled)).order_by(Court.name)
    )
    return result.scalars().all()


@router.get("/profiles", response_model=List[ProfileInDB])
async def list_profiles(
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """List the profiles of every account seen so far."""
    result = await db.execute(select(Profile).order_by(Profile.created_at))
    return result.scalars().all()


@router.post("/roles", response_model=UserRoleInDB, status_code=201)
async def grant_role(
    grant: RoleGrant,
    db: AsyncSession = Depends(get_db),
    admin: Profile = Depends(require_admin),
):
    """
    Grant a role to an account.

    The account must have signed in at least once so that its profile exists.
    """
    profile = await db.get(Profile, grant.user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    user_role = UserRole(user_id=grant.user_id, role=grant.role)
    db.add(user_role)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Account {grant.user_id} already has role {grant.role.value}",
        )
    await db.refresh(user_role)

    logger.info(f"Granted role {grant.role.value} to {grant.user_id} (by {admin.id})")
    return user_role
