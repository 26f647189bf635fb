from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from applytrack.core.config import settings
from applytrack.core.database import MAX_ROW_ID, get_db
from applytrack.core.deps import get_account_id
from applytrack.schemas.job_application import (
    JobApplicationPage,
    JobApplicationRequest,
    JobApplicationResponse,
)
from applytrack.services import application_service

router = APIRouter(prefix="/applications", tags=["Job Applications"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobApplicationResponse)
def create_application(
    request: JobApplicationRequest,
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """
    Create a job application owned by the caller.

    Company name and job role must be 2-150 characters, status one of
    APPLIED, INTERVIEWING, OFFERED, REJECTED, and the applied date may not
    be in the future.
    """
    return application_service.create(db, request, account_id)


@router.get("", response_model=JobApplicationPage)
def list_applications(
    page: int = Query(0, ge=0, le=MAX_ROW_ID, description="0-based page number"),
    size: Optional[int] = Query(None, ge=1, description="Page size (default DEFAULT_PAGE_SIZE)"),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """
    List the caller's applications, most recent applied date first.

    Args:
        page: Page number, starting at 0
        size: Rows per page (max MAX_PAGE_SIZE)
    """
    if size is not None and size > settings.MAX_PAGE_SIZE:
        size = settings.MAX_PAGE_SIZE

    return application_service.list_for_owner(db, account_id, page=page, page_size=size)


@router.get("/{application_id}", response_model=JobApplicationResponse)
def get_application(
    application_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """Retrieve one of the caller's applications. 403 if it belongs to someone else."""
    return application_service.get(db, application_id, account_id)


@router.put("/{application_id}", response_model=JobApplicationResponse)
def update_application(
    request: JobApplicationRequest,
    application_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """Replace company name, role, status and applied date."""
    return application_service.update(db, application_id, request, account_id)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(
    application_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """Delete an application together with its interview rounds."""
    application_service.delete(db, application_id, account_id)
    return None
