from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from applytrack.core.database import get_db
from applytrack.core.deps import get_account_id
from applytrack.schemas.dashboard import DashboardResponse
from applytrack.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardResponse)
def get_dashboard_stats(
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """Total applications of the caller and how many sit in each status."""
    return dashboard_service.dashboard(db, account_id)
