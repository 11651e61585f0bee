"""Court model."""
import uuid
from sqlalchemy import Column, String, Text, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from court_scheduler.core.database import Base


class Court(Base):
    """A court that can own a booking schedule."""

    __tablename__ = "courts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)  # Visible on the public calendar
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    schedule = relationship("CourtSchedule", back_populates="court", uselist=False, cascade="all, delete")
    displayed_bookings = relationship(
        "Booking",
        back_populates="display_court",
        foreign_keys="Booking.display_court_id",
        cascade="all, delete",
    )
