"""Admin identity schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from court_scheduler.models.profile import AppRole


class ProfileInDB(BaseModel):
    """Schema for profile from database."""

    id: UUID
    email: Optional[str] = None
    full_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CurrentAdmin(ProfileInDB):
    """Profile of the authenticated admin with its roles."""

    roles: List[AppRole] = []


class RoleGrant(BaseModel):
    """Schema for granting a role to an account."""

    user_id: UUID
    role: AppRole = AppRole.ADMIN


class UserRoleInDB(BaseModel):
    """Schema for role membership from database."""

    id: UUID
    user_id: UUID
    role: AppRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
