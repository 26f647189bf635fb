"""
Owner-scoped job application operations.

Every call takes the caller's account id explicitly. Lookups report a
missing row as NotFoundError and someone else's row as ForbiddenError.
"""

import logging
import math
from typing import Optional
from sqlalchemy.orm import Session

from applytrack.core.config import settings
from applytrack.core.database import MAX_ROW_ID
from applytrack.core.exceptions import NotFoundError, ValidationError
from applytrack.crud import account as account_crud
from applytrack.crud import interview_round as round_crud
from applytrack.crud import job_application as application_crud
from applytrack.models.job_application import JobApplication
from applytrack.schemas.job_application import (
    JobApplicationPage,
    JobApplicationRequest,
    JobApplicationResponse,
)
from applytrack.services.ownership import ensure_owned

logger = logging.getLogger(__name__)


def _require_account(db: Session, owner_id: int) -> None:
    if account_crud.get_by_id(db, owner_id) is None:
        raise NotFoundError("User not found")


def get_owned(db: Session, application_id: int, owner_id: int, action: str) -> JobApplication:
    """
    Load an application the caller owns.

    Raises:
        NotFoundError: no application with this id
        ForbiddenError: application belongs to another account
    """
    application = application_crud.get_by_id(db, application_id)
    if application is None:
        raise NotFoundError("Job application not found")
    ensure_owned(application, owner_id, action)
    return application


def create(db: Session, request: JobApplicationRequest, owner_id: int) -> JobApplicationResponse:
    _require_account(db, owner_id)
    application = application_crud.create(db, request, owner_id)
    logger.info(f"Created application {application.id} ({application.company_name}) for account {owner_id}")
    return JobApplicationResponse.model_validate(application)


def list_for_owner(db: Session, owner_id: int, page: int = 0, page_size: Optional[int] = None) -> JobApplicationPage:
    """
    One page of the owner's applications, newest applied date first.

    Args:
        page: 0-based page number
        page_size: rows per page, 1..MAX_PAGE_SIZE (default DEFAULT_PAGE_SIZE)
    """
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE
    if page < 0:
        raise ValidationError("Page index must not be negative")
    if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be between 1 and {settings.MAX_PAGE_SIZE}")
    if page * page_size > MAX_ROW_ID:
        raise ValidationError("Page index is out of range")

    _require_account(db, owner_id)
    items, total = application_crud.get_page_by_owner(
        db, owner_id, skip=page * page_size, limit=page_size
    )
    return JobApplicationPage(
        content=[JobApplicationResponse.model_validate(item) for item in items],
        page=page,
        size=page_size,
        total_elements=total,
        total_pages=math.ceil(total / page_size),
    )


def get(db: Session, application_id: int, owner_id: int) -> JobApplicationResponse:
    application = get_owned(db, application_id, owner_id, "access this application")
    return JobApplicationResponse.model_validate(application)


def update(db: Session, application_id: int, request: JobApplicationRequest, owner_id: int) -> JobApplicationResponse:
    """
    Replace company name, role, status and applied date.

    The applied date may not move past the date of an interview round
    already recorded for this application.
    """
    application = get_owned(db, application_id, owner_id, "update this application")

    earliest = round_crud.earliest_interview_date(db, application.id)
    if earliest is not None and request.applied_date > earliest:
        raise ValidationError("Applied date cannot be after an existing interview date")

    application = application_crud.update(db, application, request)
    logger.info(f"Updated application {application.id} (status: {application.status.value})")
    return JobApplicationResponse.model_validate(application)


def delete(db: Session, application_id: int, owner_id: int) -> None:
    application = get_owned(db, application_id, owner_id, "delete this application")
    application_crud.delete(db, application)
    logger.info(f"Deleted application {application_id} for account {owner_id}")
