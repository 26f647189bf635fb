"""
CRUD operations for JobApplication model.

Implements the Repository pattern to encapsulate all database operations
for job applications. Ownership is not checked here; the service layer
decides who may touch a row.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from applytrack.models.account import utcnow
from applytrack.models.job_application import JobApplication, ApplicationStatus
from applytrack.schemas.job_application import JobApplicationRequest


def create(db: Session, data: JobApplicationRequest, owner_id: int) -> JobApplication:
    """
    Create a new job application for an owner.

    Args:
        db: Database session
        data: Validated application data
        owner_id: Account that will own the application

    Returns:
        Created JobApplication instance with id and timestamps
    """
    now = utcnow()
    application = JobApplication(
        owner_id=owner_id,
        company_name=data.company_name,
        job_role=data.job_role,
        status=data.status,
        applied_date=data.applied_date,
        created_at=now,
        updated_at=now,
    )

    db.add(application)
    db.commit()
    db.refresh(application)

    return application


def get_by_id(db: Session, application_id: int) -> Optional[JobApplication]:
    """
    Retrieve an application by its ID, regardless of owner.

    Returns:
        JobApplication instance if found, None otherwise
    """
    return db.query(JobApplication).filter(JobApplication.id == application_id).first()


def get_page_by_owner(
    db: Session,
    owner_id: int,
    skip: int = 0,
    limit: int = 10
) -> Tuple[List[JobApplication], int]:
    """
    Retrieve one page of an owner's applications.

    Ordered by applied date descending; rows sharing an applied date keep
    insertion order (id ascending).

    Returns:
        (applications on this page, total number of the owner's applications)
    """
    query = db.query(JobApplication).filter(JobApplication.owner_id == owner_id)
    total = query.count()

    items = (
        query.order_by(JobApplication.applied_date.desc(), JobApplication.id.asc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return items, total


def update(db: Session, application: JobApplication, data: JobApplicationRequest) -> JobApplication:
    """
    Replace the mutable fields of an application.

    Owner and id are never touched. updated_at is set explicitly so it moves
    even when the new values equal the old ones.
    """
    application.company_name = data.company_name
    application.job_role = data.job_role
    application.status = data.status
    application.applied_date = data.applied_date
    application.updated_at = utcnow()

    db.commit()
    db.refresh(application)

    return application


def delete(db: Session, application: JobApplication) -> None:
    """Delete an application; its interview rounds go with it."""
    db.delete(application)
    db.commit()


def count_by_owner(db: Session, owner_id: int) -> int:
    return db.query(JobApplication).filter(JobApplication.owner_id == owner_id).count()


def count_by_owner_grouped_by_status(db: Session, owner_id: int) -> Dict[ApplicationStatus, int]:
    """
    Count an owner's applications per status in one query.

    Statuses with no applications are absent from the result.
    """
    rows = (
        db.query(JobApplication.status, func.count(JobApplication.id))
        .filter(JobApplication.owner_id == owner_id)
        .group_by(JobApplication.status)
        .all()
    )
    return {status: count for status, count in rows}
