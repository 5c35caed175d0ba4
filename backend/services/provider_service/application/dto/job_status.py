"""DTOs for the job listing and status update endpoints."""
from typing import List, Optional

from pydantic import BaseModel, Field

from services.provider_service.application.domain.job import Job


class JobStatusUpdateRequest(BaseModel):
    # Left untyped so a missing or unknown status surfaces as InvalidArgumentError
    # from the service rather than a request validation error.
    status: Optional[str] = Field(
        default=None,
        description="New status: pending, in progress, completed or cancelled.",
    )
    notes: Optional[str] = Field(
        default=None, description="Stored into the job description when present."
    )


class JobListResponse(BaseModel):
    success: bool = True
    jobs: List[Job] = Field(default_factory=list)
