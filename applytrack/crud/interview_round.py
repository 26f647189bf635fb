"""
CRUD operations for InterviewRound model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from applytrack.models.interview_round import InterviewRound
from applytrack.schemas.interview_round import InterviewRoundRequest


def create(db: Session, data: InterviewRoundRequest, job_application_id: int) -> InterviewRound:
    """
    Create a new interview round under an application.

    Args:
        db: Database session
        data: Validated round data
        job_application_id: Parent application

    Returns:
        Created InterviewRound instance with id
    """
    interview_round = InterviewRound(
        job_application_id=job_application_id,
        round_type=data.round_type,
        interview_date=data.interview_date,
        notes=data.notes,
        result=data.result,
    )

    db.add(interview_round)
    db.commit()
    db.refresh(interview_round)

    return interview_round


def get_by_id(db: Session, round_id: int) -> Optional[InterviewRound]:
    return db.query(InterviewRound).filter(InterviewRound.id == round_id).first()


def get_by_application(db: Session, job_application_id: int) -> List[InterviewRound]:
    """All rounds of an application in creation order."""
    return (
        db.query(InterviewRound)
        .filter(InterviewRound.job_application_id == job_application_id)
        .order_by(InterviewRound.id.asc())
        .all()
    )


def earliest_interview_date(db: Session, job_application_id: int):
    """
    Earliest interview date recorded for an application.

    Returns:
        date of the earliest round, or None when the application has no rounds
    """
    first = (
        db.query(InterviewRound.interview_date)
        .filter(InterviewRound.job_application_id == job_application_id)
        .order_by(InterviewRound.interview_date.asc())
        .first()
    )
    return first[0] if first else None


def update(db: Session, interview_round: InterviewRound, data: InterviewRoundRequest) -> InterviewRound:
    """Replace the mutable fields of a round; the parent never changes."""
    interview_round.round_type = data.round_type
    interview_round.interview_date = data.interview_date
    interview_round.notes = data.notes
    interview_round.result = data.result

    db.commit()
    db.refresh(interview_round)

    return interview_round


def delete(db: Session, interview_round: InterviewRound) -> None:
    db.delete(interview_round)
    db.commit()
