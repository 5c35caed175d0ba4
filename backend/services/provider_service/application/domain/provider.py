from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models.base_models import utcnow


class ServiceType(str, Enum):
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    CARPENTRY = "carpentry"
    APPLIANCE = "appliance"
    CLEANING = "cleaning"


class ExperienceUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class Provider(BaseModel):
    """
    A service professional. The job counters and ``total_earnings`` are running
    totals maintained by status transitions, not values derived from the jobs.
    """

    id: Optional[str] = None
    name: str
    email: str
    phone: str
    hashed_password: str
    service_type: ServiceType
    experience: int = Field(ge=0)
    experience_unit: ExperienceUnit = ExperienceUnit.YEARS
    license_image: Optional[str] = None
    profile_image: Optional[str] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    # $inc deltas are unconditional, so stored counters may dip below zero.
    total_jobs: int = 0
    pending_jobs: int = 0
    completed_jobs: int = 0
    total_earnings: float = 0.0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
