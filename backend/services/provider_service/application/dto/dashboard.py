"""DTOs describing the provider dashboard snapshot."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.job import JobStatus
from services.provider_service.application.domain.provider import ServiceType


class DashboardProviderSummary(BaseModel):
    name: str
    service_type: ServiceType
    rating: float
    total_jobs: int
    pending_jobs: int
    completed_jobs: int
    total_earnings: float
    today_appointments: int = Field(
        0, description="Jobs whose date falls within the current calendar day (UTC)."
    )


class RecentJob(BaseModel):
    id: Optional[str] = None
    customer_name: str
    service_type: str
    date: Optional[datetime] = None
    status: JobStatus


class RecentTransaction(BaseModel):
    id: Optional[str] = None
    service: str
    customer_name: str
    amount: float
    date: datetime


class DashboardSnapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    provider: DashboardProviderSummary
    recent_jobs: List[RecentJob] = Field(
        default_factory=list, serialization_alias="recentJobs"
    )
    recent_transactions: List[RecentTransaction] = Field(
        default_factory=list, serialization_alias="recentTransactions"
    )
    monthly_earnings: List[MonthlyEarnings] = Field(
        default_factory=list, serialization_alias="monthlyEarnings"
    )


class DashboardResponse(DashboardSnapshot):
    success: bool = True
