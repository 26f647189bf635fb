"""
Interview round model.

An interview round hangs off a single job application and is owned
transitively by that application's account.
"""

import enum
from sqlalchemy import Column, Integer, Date, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from applytrack.core.database import Base


class RoundType(str, enum.Enum):
    PHONE = "PHONE"
    HR = "HR"
    TECHNICAL = "TECHNICAL"
    MANAGERIAL = "MANAGERIAL"
    ONSITE = "ONSITE"


class InterviewResult(str, enum.Enum):
    PENDING = "PENDING"
    PASSED = "PASSED"
    FAILED = "FAILED"


class InterviewRound(Base):
    __tablename__ = "interview_rounds"

    id = Column(Integer, primary_key=True, index=True)
    job_application_id = Column(
        Integer,
        ForeignKey("job_applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    round_type = Column(Enum(RoundType), nullable=False)
    interview_date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    result = Column(Enum(InterviewResult), default=InterviewResult.PENDING, nullable=False)

    # Relationships
    job_application = relationship("JobApplication", back_populates="interview_rounds")

    def __repr__(self):
        return f"<InterviewRound(id={self.id}, job_application_id={self.job_application_id}, round_type={self.round_type.value})>"
