from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.transaction import Transaction


class TransactionRepository(ABC):
    """Read-side output port for the earnings ledger."""

    @abstractmethod
    def list_by_provider(
        self, provider_id: str, since: Optional[datetime] = None
    ) -> List[Transaction]:
        """Transactions for a provider dated at or after ``since``, newest first."""
        pass

    @abstractmethod
    def list_recent(self, provider_id: str, limit: int) -> List[Transaction]:
        pass

    @abstractmethod
    def sum_amount(self, provider_id: str, since: Optional[datetime] = None) -> float:
        """Sum of amounts dated at or after ``since``; 0 when nothing matches."""
        pass

    @abstractmethod
    def monthly_totals(self, provider_id: str, since: datetime) -> List[MonthlyEarnings]:
        """Per (year, month) sums since ``since``, ascending, empty months omitted."""
        pass
