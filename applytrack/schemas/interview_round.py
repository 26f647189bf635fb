from pydantic import Field
from typing import Optional
from datetime import date

from applytrack.models.interview_round import RoundType, InterviewResult
from applytrack.schemas.base import CamelModel


class InterviewRoundRequest(CamelModel):
    """Schema for creating or replacing an interview round"""
    round_type: RoundType
    interview_date: date
    notes: Optional[str] = Field(None, max_length=5000)
    result: InterviewResult


class InterviewRoundResponse(CamelModel):
    """Schema for interview round response"""
    id: int
    round_type: RoundType
    interview_date: date
    notes: Optional[str] = None
    result: InterviewResult
    job_application_id: int
