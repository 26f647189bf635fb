"""
Database models package.
"""

from applytrack.models.account import Account, Role
from applytrack.models.job_application import JobApplication, ApplicationStatus
from applytrack.models.interview_round import InterviewRound, RoundType, InterviewResult

__all__ = [
    "Account",
    "Role",
    "JobApplication",
    "ApplicationStatus",
    "InterviewRound",
    "RoundType",
    "InterviewResult",
]
