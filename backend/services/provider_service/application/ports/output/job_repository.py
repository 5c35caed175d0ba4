from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from services.provider_service.application.domain.job import Job, JobStatus


class JobRepository(ABC):
    """Read-side output port for jobs. Status writes go through JobLedgerRepository."""

    @abstractmethod
    def get_by_id(self, job_id: str) -> Optional[Job]:
        pass

    @abstractmethod
    def list_by_provider(
        self, provider_id: str, status: Optional[JobStatus] = None
    ) -> List[Job]:
        """Jobs for a provider, most recently dated first."""
        pass

    @abstractmethod
    def list_recent(self, provider_id: str, limit: int) -> List[Job]:
        pass

    @abstractmethod
    def count_in_date_range(
        self, provider_id: str, start: datetime, end: datetime
    ) -> int:
        """Counts jobs whose ``date`` falls in ``[start, end)``."""
        pass

    @abstractmethod
    def sum_amount_by_status(self, provider_id: str, status: JobStatus) -> float:
        pass

    @abstractmethod
    def count_by_status(self, provider_id: str) -> Dict[JobStatus, int]:
        pass
