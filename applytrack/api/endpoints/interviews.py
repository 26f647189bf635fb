from typing import List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from applytrack.core.database import MAX_ROW_ID, get_db
from applytrack.core.deps import get_account_id
from applytrack.schemas.interview_round import InterviewRoundRequest, InterviewRoundResponse
from applytrack.services import interview_service

router = APIRouter(prefix="/interviews", tags=["Interview Rounds"])


@router.post(
    "/application/{application_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=InterviewRoundResponse
)
def add_interview_round(
    request: InterviewRoundRequest,
    application_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """
    Add an interview round to one of the caller's applications.

    The interview date may not precede the application's applied date.
    """
    return interview_service.add(db, application_id, request, account_id)


@router.get("/application/{application_id}", response_model=List[InterviewRoundResponse])
def list_interview_rounds(
    application_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    """List an application's rounds in the order they were added."""
    return interview_service.list_by_application(db, application_id, account_id)


@router.put("/{round_id}", response_model=InterviewRoundResponse)
def update_interview_round(
    request: InterviewRoundRequest,
    round_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    return interview_service.update(db, round_id, request, account_id)


@router.delete("/{round_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview_round(
    round_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    account_id: int = Depends(get_account_id),
    db: Session = Depends(get_db)
):
    interview_service.delete(db, round_id, account_id)
    return None
