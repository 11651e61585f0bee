"""Holiday model."""
import uuid
from sqlalchemy import Column, String, Text, DateTime, Date, Uuid
from sqlalchemy.sql import func
from court_scheduler.core.database import Base


class Holiday(Base):
    """A named date on which no court can be booked."""

    __tablename__ = "holidays"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
