from pydantic import Field, field_validator
from typing import List
from datetime import date, datetime

from applytrack.models.job_application import ApplicationStatus
from applytrack.schemas.base import CamelModel


class JobApplicationRequest(CamelModel):
    """Schema for creating or replacing a job application"""
    company_name: str = Field(..., min_length=2, max_length=150)
    job_role: str = Field(..., min_length=2, max_length=150)
    status: ApplicationStatus
    applied_date: date

    @field_validator("company_name", "job_role", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("applied_date")
    @classmethod
    def applied_date_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Applied date cannot be in the future")
        return v


class JobApplicationResponse(CamelModel):
    """Schema for job application response"""
    id: int
    company_name: str
    job_role: str
    status: ApplicationStatus
    applied_date: date
    created_at: datetime
    updated_at: datetime
    owner_id: int


class JobApplicationPage(CamelModel):
    """One page of an owner's applications, newest applied date first"""
    content: List[JobApplicationResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
