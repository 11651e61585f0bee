"""Booking model."""
import uuid
from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Time, Uuid, Index, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from court_scheduler.core.database import Base


class Booking(Base):
    """A booked time range on a schedule, optionally shown under another court."""

    __tablename__ = "bookings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    schedule_id = Column(Uuid, ForeignKey("court_schedules.id", ondelete="CASCADE"), nullable=False, index=True)
    display_court_id = Column(Uuid, ForeignKey("courts.id", ondelete="CASCADE"), nullable=True, index=True)
    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)  # Wall clock, inclusive
    end_time = Column(Time, nullable=False)    # Wall clock, exclusive
    case_number = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    schedule = relationship("CourtSchedule", back_populates="bookings")
    display_court = relationship(
        "Court",
        back_populates="displayed_bookings",
        foreign_keys=[display_court_id],
        lazy="joined",
    )

    __table_args__ = (
        CheckConstraint("start_time < end_time", name="ck_bookings_start_before_end"),
        Index("ix_bookings_schedule_date", "schedule_id", "date"),
        Index("ix_bookings_date_display_court", "date", "display_court_id"),
    )
