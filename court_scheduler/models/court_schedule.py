"""Court schedule model."""
import uuid
from sqlalchemy import Column, Boolean, ForeignKey, DateTime, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from court_scheduler.core.database import Base


class CourtSchedule(Base):
    """The booking surface of exactly one court."""

    __tablename__ = "court_schedules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    court_id = Column(Uuid, ForeignKey("courts.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    court = relationship("Court", back_populates="schedule", lazy="joined")
    bookings = relationship("Booking", back_populates="schedule", cascade="all, delete")
