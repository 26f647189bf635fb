"""
Account model for authentication and ownership.

Every job application (and transitively every interview round) belongs to
exactly one Account.
"""

import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from applytrack.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(str, enum.Enum):
    """Account role. Registration always assigns USER."""
    USER = "USER"


class Account(Base):
    """A registered user identity with credentials and a role."""
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)

    # Authentication credentials
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(Role), default=Role.USER, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    applications = relationship("JobApplication", back_populates="owner", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Account(id={self.id}, email='{self.email}', role={self.role.value})>"
