"""Shared fixtures: a throwaway SQLite database and an ASGI test client."""
import os
import tempfile
import time
import uuid
from datetime import date

_db_dir = tempfile.mkdtemp(prefix="court-scheduler-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["AUTH_JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"

import httpx  # noqa: E402
import jwt  # noqa: E402
import pytest  # noqa: E402

from court_scheduler.core.config import settings  # noqa: E402
from court_scheduler.core.database import AsyncSessionLocal, Base, engine  # noqa: E402
from court_scheduler.main import app  # noqa: E402
from court_scheduler.models import AppRole, Court, CourtSchedule, Profile, UserRole  # noqa: E402

MONDAY = date(2024, 5, 6)
FRIDAY = date(2024, 5, 10)


def make_token(user_id, email="admin@example.com", full_name=None, expires_in=3600):
    claims = {
        "sub": str(user_id),
        "email": email,
        "aud": settings.AUTH_JWT_AUDIENCE,
        "exp": int(time.time()) + expires_in,
    }
    if full_name is not None:
        claims["user_metadata"] = {"full_name": full_name}
    return jwt.encode(claims, settings.AUTH_JWT_SECRET, algorithm=settings.AUTH_JWT_ALGORITHM)


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def db(database):
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(database):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admin_headers(db):
    user_id = uuid.uuid4()
    db.add(Profile(id=user_id, email="admin@example.com", full_name="Court Admin"))
    db.add(UserRole(user_id=user_id, role=AppRole.ADMIN))
    await db.commit()
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
async def court_with_schedule(db):
    court = Court(name="Courtroom A", location="Main Building")
    other = Court(name="Courtroom B", location="Annex")
    db.add_all([court, other])
    await db.flush()
    schedule = CourtSchedule(court_id=court.id)
    db.add(schedule)
    await db.commit()
    return court, other, schedule
