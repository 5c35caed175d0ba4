from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models.base_models import utcnow


class JobStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Job(BaseModel):
    """
    A unit of requested work for one provider. Jobs are booked elsewhere; inside
    this service only their status (and description) ever changes.
    """

    id: Optional[str] = None
    provider_id: str
    customer_name: str
    service_type: str
    description: Optional[str] = None
    status: JobStatus = JobStatus.PENDING
    amount: Optional[float] = Field(default=None, ge=0)
    date: Optional[datetime] = None
    time: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
