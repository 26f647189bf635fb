import enum
from sqlalchemy import Column, Integer, String, Date, DateTime, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from applytrack.core.database import Base
from applytrack.models.account import utcnow


class ApplicationStatus(str, enum.Enum):
    """
    Where an application stands.

    - APPLIED: Application submitted
    - INTERVIEWING: At least one interview scheduled or held
    - OFFERED: Offer received
    - REJECTED: Closed without an offer
    """
    APPLIED = "APPLIED"
    INTERVIEWING = "INTERVIEWING"
    OFFERED = "OFFERED"
    REJECTED = "REJECTED"


class JobApplication(Base):
    """
    A job application owned by one account.

    owner_id never changes after creation; updated_at is refreshed on
    every mutation.
    """
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)

    company_name = Column(String(150), nullable=False)
    job_role = Column(String(150), nullable=False)
    status = Column(Enum(ApplicationStatus), default=ApplicationStatus.APPLIED, nullable=False, index=True)
    applied_date = Column(Date, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("Account", back_populates="applications")
    interview_rounds = relationship(
        "InterviewRound",
        back_populates="job_application",
        cascade="all, delete-orphan",
        order_by="InterviewRound.id",
    )

    # Listing is always owner-scoped and sorted by applied date
    __table_args__ = (
        Index('ix_job_applications_owner_applied', 'owner_id', 'applied_date'),
    )

    def __repr__(self):
        return f"<JobApplication(id={self.id}, company='{self.company_name}', status={self.status.value})>"
