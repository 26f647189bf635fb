"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between services and database
operations, following the Repository pattern.
"""

from applytrack.crud import account, job_application, interview_round

__all__ = ["account", "job_application", "interview_round"]
