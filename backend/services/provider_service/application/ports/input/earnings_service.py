from abc import ABC, abstractmethod
from typing import List

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.transaction import Transaction
from services.provider_service.application.dto.dashboard import DashboardSnapshot
from services.provider_service.application.dto.earnings import (
    EarningsSummary,
    ReconciliationReport,
)


class EarningsService(ABC):
    """Input port defining the read-only earnings use cases."""

    @abstractmethod
    def get_earnings_summary(self, provider_id: str) -> EarningsSummary:
        """Lifetime, last-30-days, last-7-days and pending-job totals."""
        pass

    @abstractmethod
    def get_monthly_breakdown(
        self, provider_id: str, months_back: int = 6
    ) -> List[MonthlyEarnings]:
        pass

    @abstractmethod
    def get_dashboard_snapshot(self, provider_id: str) -> DashboardSnapshot:
        pass

    @abstractmethod
    def list_transactions(self, provider_id: str, time: str = "all") -> List[Transaction]:
        """``time`` is one of week, month, quarter or all."""
        pass

    @abstractmethod
    def reconcile_counters(self, provider_id: str) -> ReconciliationReport:
        """Compares stored provider counters with recomputed ones. Never writes."""
        pass
