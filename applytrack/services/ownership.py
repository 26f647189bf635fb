"""
Ownership checks shared by every owner-scoped service.

An application is owned by its account; an interview round is owned by
whoever owns its parent application.
"""

import logging
from typing import Union

from applytrack.core.exceptions import ForbiddenError
from applytrack.models.interview_round import InterviewRound
from applytrack.models.job_application import JobApplication

logger = logging.getLogger(__name__)

OwnedEntity = Union[JobApplication, InterviewRound]


def owner_of(entity: OwnedEntity) -> int:
    """Resolve the owning account id, following a round up to its application."""
    if isinstance(entity, JobApplication):
        return entity.owner_id
    if isinstance(entity, InterviewRound):
        return entity.job_application.owner_id
    raise TypeError(f"{type(entity).__name__} has no owner")


def is_owned_by(entity: OwnedEntity, account_id: int) -> bool:
    return owner_of(entity) == account_id


def ensure_owned(entity: OwnedEntity, account_id: int, action: str) -> None:
    """
    Raise ForbiddenError unless account_id owns the entity.

    Args:
        entity: Application or interview round being accessed
        account_id: Caller's resolved account id
        action: Short verb phrase for the error message, e.g. "update this application"
    """
    if not is_owned_by(entity, account_id):
        logger.warning(
            f"Account {account_id} denied: {action} "
            f"({type(entity).__name__} id={entity.id})"
        )
        raise ForbiddenError(f"Not authorized to {action}")
