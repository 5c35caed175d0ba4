import logging
import math
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

from services.provider_service.application.domain.earnings import (
    MonthlyEarnings,
    months_before,
)
from services.provider_service.application.domain.job import JobStatus
from services.provider_service.application.domain.transaction import Transaction
from services.provider_service.application.dto.dashboard import (
    DashboardProviderSummary,
    DashboardSnapshot,
    RecentJob,
    RecentTransaction,
)
from services.provider_service.application.dto.earnings import (
    CounterSnapshot,
    EarningsSummary,
    ReconciliationReport,
)
from services.provider_service.application.exceptions import (
    InvalidArgumentError,
    ProviderNotFoundError,
)
from services.provider_service.application.ports.input.earnings_service import (
    EarningsService,
)
from services.provider_service.application.ports.output.job_repository import (
    JobRepository,
)
from services.provider_service.application.ports.output.provider_repository import (
    ProviderRepository,
)
from services.provider_service.application.ports.output.transaction_repository import (
    TransactionRepository,
)
from shared.models.base_models import is_valid_object_id, utcnow

logger = logging.getLogger(__name__)

DASHBOARD_RECENT_LIMIT = 5
DASHBOARD_MONTHS_BACK = 6
MAX_MONTHS_BACK = 24


class EarningsServiceImpl(EarningsService):
    """
    Concrete implementation of the EarningsService input port.
    Every operation is a read; provider counters are reported, never rewritten.
    """

    def __init__(
        self,
        provider_repository: ProviderRepository,
        job_repository: JobRepository,
        transaction_repository: TransactionRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.provider_repository = provider_repository
        self.job_repository = job_repository
        self.transaction_repository = transaction_repository
        self.clock = clock

    def get_earnings_summary(self, provider_id: str) -> EarningsSummary:
        self._require_valid_id(provider_id)
        now = self.clock()

        return EarningsSummary(
            lifetime=self.transaction_repository.sum_amount(provider_id),
            monthly=self.transaction_repository.sum_amount(
                provider_id, since=now - timedelta(days=30)
            ),
            weekly=self.transaction_repository.sum_amount(
                provider_id, since=now - timedelta(days=7)
            ),
            pending=self.job_repository.sum_amount_by_status(
                provider_id, JobStatus.PENDING
            ),
        )

    def get_monthly_breakdown(
        self, provider_id: str, months_back: int = DASHBOARD_MONTHS_BACK
    ) -> List[MonthlyEarnings]:
        self._require_valid_id(provider_id)
        if not 1 <= months_back <= MAX_MONTHS_BACK:
            raise InvalidArgumentError(
                f"months must be between 1 and {MAX_MONTHS_BACK}"
            )

        since = months_before(self.clock(), months_back)
        groups = self.transaction_repository.monthly_totals(provider_id, since)
        return sorted(groups, key=lambda group: (group.year, group.month))

    def get_dashboard_snapshot(self, provider_id: str) -> DashboardSnapshot:
        """
        Builds the dashboard payload.
        1. Loads the provider (404 when absent).
        2. Counts jobs dated within the current UTC day.
        3. Fetches the five most recently dated jobs and transactions.
        4. Adds the six-month earnings breakdown.
        """
        self._require_valid_id(provider_id)
        provider = self.provider_repository.get_by_id(provider_id)
        if not provider:
            logger.warning("Dashboard requested for unknown provider %s", provider_id)
            raise ProviderNotFoundError("Provider not found")

        start_of_day, start_of_next_day = self._get_current_day_range()
        today_appointments = self.job_repository.count_in_date_range(
            provider_id, start_of_day, start_of_next_day
        )

        recent_jobs = [
            RecentJob.model_validate(job, from_attributes=True)
            for job in self.job_repository.list_recent(
                provider_id, DASHBOARD_RECENT_LIMIT
            )
        ]
        recent_transactions = [
            RecentTransaction.model_validate(tx, from_attributes=True)
            for tx in self.transaction_repository.list_recent(
                provider_id, DASHBOARD_RECENT_LIMIT
            )
        ]

        return DashboardSnapshot(
            provider=DashboardProviderSummary(
                name=provider.name,
                service_type=provider.service_type,
                rating=provider.rating,
                total_jobs=provider.total_jobs,
                pending_jobs=provider.pending_jobs,
                completed_jobs=provider.completed_jobs,
                total_earnings=provider.total_earnings,
                today_appointments=today_appointments,
            ),
            recent_jobs=recent_jobs,
            recent_transactions=recent_transactions,
            monthly_earnings=self.get_monthly_breakdown(
                provider_id, DASHBOARD_MONTHS_BACK
            ),
        )

    def list_transactions(self, provider_id: str, time: str = "all") -> List[Transaction]:
        self._require_valid_id(provider_id)
        since = self._resolve_time_filter(time)
        return self.transaction_repository.list_by_provider(provider_id, since=since)

    def reconcile_counters(self, provider_id: str) -> ReconciliationReport:
        self._require_valid_id(provider_id)
        provider = self.provider_repository.get_by_id(provider_id)
        if not provider:
            raise ProviderNotFoundError("Provider not found")

        counts: Dict[JobStatus, int] = self.job_repository.count_by_status(provider_id)
        derived = CounterSnapshot(
            total_jobs=sum(counts.values()),
            pending_jobs=counts.get(JobStatus.PENDING, 0),
            completed_jobs=counts.get(JobStatus.COMPLETED, 0),
            total_earnings=self.transaction_repository.sum_amount(provider_id),
        )
        stored = CounterSnapshot(
            total_jobs=provider.total_jobs,
            pending_jobs=provider.pending_jobs,
            completed_jobs=provider.completed_jobs,
            total_earnings=provider.total_earnings,
        )

        drifted_fields = [
            field
            for field in ("total_jobs", "pending_jobs", "completed_jobs")
            if getattr(stored, field) != getattr(derived, field)
        ]
        if not math.isclose(
            stored.total_earnings, derived.total_earnings, abs_tol=0.005
        ):
            drifted_fields.append("total_earnings")

        if drifted_fields:
            logger.warning(
                "Counter drift for provider %s: %s",
                provider_id,
                ", ".join(drifted_fields),
            )

        return ReconciliationReport(
            provider_id=provider_id,
            stored=stored,
            derived=derived,
            drift=bool(drifted_fields),
            drifted_fields=drifted_fields,
        )

    def _require_valid_id(self, provider_id: str) -> None:
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")

    def _get_current_day_range(self):
        """Returns the [00:00 today, 00:00 tomorrow) range in UTC."""
        start_of_day = self.clock().replace(hour=0, minute=0, second=0, microsecond=0)
        return start_of_day, start_of_day + timedelta(days=1)

    def _resolve_time_filter(self, time: Optional[str]) -> Optional[datetime]:
        now = self.clock()
        if time == "week":
            return now - timedelta(days=7)
        if time == "month":
            return months_before(now, 1)
        if time == "quarter":
            return months_before(now, 3)
        return None
