"""
Interview rounds nested under job applications.

Ownership is checked through the parent application: whoever owns the
application owns its rounds.
"""

import logging
from typing import List
from sqlalchemy.orm import Session

from applytrack.core.exceptions import NotFoundError, ValidationError
from applytrack.crud import interview_round as round_crud
from applytrack.models.interview_round import InterviewRound
from applytrack.models.job_application import JobApplication
from applytrack.schemas.interview_round import InterviewRoundRequest, InterviewRoundResponse
from applytrack.services.application_service import get_owned as get_owned_application
from applytrack.services.ownership import ensure_owned

logger = logging.getLogger(__name__)


def _check_interview_date(request: InterviewRoundRequest, application: JobApplication) -> None:
    if request.interview_date < application.applied_date:
        raise ValidationError("Interview date cannot be before application date")


def _get_owned_round(db: Session, round_id: int, owner_id: int, action: str) -> InterviewRound:
    interview_round = round_crud.get_by_id(db, round_id)
    if interview_round is None:
        raise NotFoundError("Interview round not found")
    ensure_owned(interview_round, owner_id, action)
    return interview_round


def add(db: Session, application_id: int, request: InterviewRoundRequest, owner_id: int) -> InterviewRoundResponse:
    """
    Add a round to an application the caller owns.

    Raises:
        NotFoundError: application does not exist
        ForbiddenError: application belongs to another account
        ValidationError: interview date precedes the applied date
    """
    application = get_owned_application(db, application_id, owner_id, "add an interview to this application")
    _check_interview_date(request, application)

    interview_round = round_crud.create(db, request, application.id)
    logger.info(f"Added {interview_round.round_type.value} round {interview_round.id} to application {application.id}")
    return InterviewRoundResponse.model_validate(interview_round)


def update(db: Session, round_id: int, request: InterviewRoundRequest, owner_id: int) -> InterviewRoundResponse:
    interview_round = _get_owned_round(db, round_id, owner_id, "update this interview")
    _check_interview_date(request, interview_round.job_application)

    interview_round = round_crud.update(db, interview_round, request)
    logger.info(f"Updated interview round {interview_round.id} (result: {interview_round.result.value})")
    return InterviewRoundResponse.model_validate(interview_round)


def delete(db: Session, round_id: int, owner_id: int) -> None:
    interview_round = _get_owned_round(db, round_id, owner_id, "delete this interview")
    round_crud.delete(db, interview_round)
    logger.info(f"Deleted interview round {round_id}")


def list_by_application(db: Session, application_id: int, owner_id: int) -> List[InterviewRoundResponse]:
    """All rounds of an owned application, in creation order."""
    application = get_owned_application(db, application_id, owner_id, "access these interviews")
    return [
        InterviewRoundResponse.model_validate(interview_round)
        for interview_round in round_crud.get_by_application(db, application.id)
    ]
