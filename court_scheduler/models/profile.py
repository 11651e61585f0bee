"""Admin identity models."""
import enum
import uuid
from sqlalchemy import Column, String, DateTime, Enum, ForeignKey, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from court_scheduler.core.database import Base


class AppRole(str, enum.Enum):
    """Roles an account can hold."""

    ADMIN = "admin"


class Profile(Base):
    """Profile of an account issued by the auth provider."""

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True)  # Account id from the auth provider
    email = Column(String, nullable=True)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    roles = relationship("UserRole", back_populates="profile", cascade="all, delete")


class UserRole(Base):
    """Membership of an account in a role."""

    __tablename__ = "user_roles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(Enum(AppRole, name="app_role", values_callable=lambda e: [m.value for m in e]), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    profile = relationship("Profile", back_populates="roles")

    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )
