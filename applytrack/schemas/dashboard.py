from pydantic import Field

from applytrack.schemas.base import CamelModel


class DashboardResponse(CamelModel):
    """Per-owner application counts. The four status counts sum to the total."""
    total_applications: int = Field(..., ge=0)
    applied_count: int = Field(..., ge=0)
    interviewing_count: int = Field(..., ge=0)
    offered_count: int = Field(..., ge=0)
    rejected_count: int = Field(..., ge=0)
