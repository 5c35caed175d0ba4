"""DTOs for earnings rollups, transaction history and counter reconciliation."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.transaction import Transaction


class EarningsSummary(BaseModel):
    lifetime: float = Field(0.0, description="Sum of every transaction.")
    monthly: float = Field(0.0, description="Transactions dated in the last 30 days.")
    weekly: float = Field(0.0, description="Transactions dated in the last 7 days.")
    pending: float = Field(0.0, description="Sum of amounts over pending jobs.")


class EarningsSummaryResponse(BaseModel):
    success: bool = True
    earnings: EarningsSummary


class MonthlyBreakdownResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    monthly_earnings: List[MonthlyEarnings] = Field(
        default_factory=list, serialization_alias="monthlyEarnings"
    )


class TransactionListResponse(BaseModel):
    success: bool = True
    transactions: List[Transaction] = Field(default_factory=list)


class CounterSnapshot(BaseModel):
    total_jobs: int = 0
    pending_jobs: int = 0
    completed_jobs: int = 0
    total_earnings: float = 0.0


class ReconciliationReport(BaseModel):
    """Stored provider counters next to the values derived from jobs and transactions."""

    provider_id: str
    stored: CounterSnapshot
    derived: CounterSnapshot
    drift: bool
    drifted_fields: List[str] = Field(default_factory=list)


class ReconciliationResponse(BaseModel):
    success: bool = True
    report: ReconciliationReport
