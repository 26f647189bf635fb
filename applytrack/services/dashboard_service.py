"""
Dashboard aggregation: how many of an owner's applications sit in each status.
"""

from sqlalchemy.orm import Session

from applytrack.core.exceptions import NotFoundError
from applytrack.crud import account as account_crud
from applytrack.crud import job_application as application_crud
from applytrack.models.job_application import ApplicationStatus
from applytrack.schemas.dashboard import DashboardResponse


def dashboard(db: Session, owner_id: int) -> DashboardResponse:
    """
    Count the owner's applications, in total and per status.

    Counts are keyed by the ApplicationStatus member itself and every member
    is present (zero when unused), so the per-status counts add up to the
    total.

    Raises:
        NotFoundError: owner_id is not an account
    """
    if account_crud.get_by_id(db, owner_id) is None:
        raise NotFoundError("User not found")

    grouped = application_crud.count_by_owner_grouped_by_status(db, owner_id)
    counts = {status: grouped.get(status, 0) for status in ApplicationStatus}

    return DashboardResponse(
        total_applications=application_crud.count_by_owner(db, owner_id),
        applied_count=counts[ApplicationStatus.APPLIED],
        interviewing_count=counts[ApplicationStatus.INTERVIEWING],
        offered_count=counts[ApplicationStatus.OFFERED],
        rejected_count=counts[ApplicationStatus.REJECTED],
    )
