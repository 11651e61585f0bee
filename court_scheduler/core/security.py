"""Session verification and role checks.

Accounts and sessions live with the external auth provider. This module only
verifies the provider's bearer tokens, provisions a profile for accounts seen
for the first time and checks role membership.
"""
import logging
from typing import Any, Dict, Optional
from uuid import UUID

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from court_scheduler.core.config import settings
from court_scheduler.core.database import get_db
from court_scheduler.core.exceptions import AuthenticationRequired, PermissionDenied
from court_scheduler.models.profile import AppRole, Profile, UserRole

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

SESSION_COOKIE = "access_token"


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify a provider-issued token and return its claims.

    Raises:
        AuthenticationRequired: If the token is malformed, expired or not
            signed with the configured secret
    """
    try:
        return jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[settings.AUTH_JWT_ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE,
        )
    except jwt.PyJWTError as e:
        logger.info(f"Rejected session token: {e}")
        raise AuthenticationRequired("Invalid or expired session")


async def has_role(db: AsyncSession, user_id: UUID, role: AppRole) -> bool:
    """Whether the account holds ``role``."""
    result = await db.execute(
        select(UserRole.id).where(UserRole.user_id == user_id, UserRole.role == role)
    )
    return result.first() is not None


async def ensure_profile(db: AsyncSession, claims: Dict[str, Any]) -> Profile:
    """Return the profile for the token's account, creating it on first sight."""
    try:
        user_id = UUID(str(claims.get("sub")))
    except ValueError:
        raise AuthenticationRequired("Session has no valid subject")

    profile = await db.get(Profile, user_id)
    if profile:
        return profile

    metadata = claims.get("user_metadata")
    if not isinstance(metadata, dict):
        metadata = {}
    profile = Profile(
        id=user_id,
        email=claims.get("email"),
        full_name=metadata.get("full_name") or "",
    )
    db.add(profile)
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent request provisioned the same account first
        await db.rollback()
        existing = await db.get(Profile, user_id)
        if existing is None:
            raise
        return existing
    await db.refresh(profile)

    logger.info(f"Provisioned profile for account {user_id}")
    return profile


async def get_current_profile(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """Resolve the session from the Authorization header or session cookie."""
    token = credentials.credentials if credentials else request.cookies.get(SESSION_COOKIE)
    if not token:
        raise AuthenticationRequired("No active session")

    claims = decode_token(token)
    return await ensure_profile(db, claims)


async def require_admin(
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """Dependency guarding admin-only operations."""
    if not await has_role(db, profile.id, AppRole.ADMIN):
        raise PermissionDenied()
    return profile
