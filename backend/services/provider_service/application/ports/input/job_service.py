from abc import ABC, abstractmethod
from typing import List, Optional

from services.provider_service.application.domain.job import Job
from services.provider_service.application.domain.job_transition import JobTransition


class JobService(ABC):
    """Input port defining the job lifecycle use cases."""

    @abstractmethod
    def list_jobs(self, provider_id: str, status: Optional[str] = None) -> List[Job]:
        """
        Lists a provider's jobs, newest date first. ``status`` of None or "all"
        disables the status filter.
        """
        pass

    @abstractmethod
    def update_job_status(
        self, job_id: str, new_status: Optional[str], notes: Optional[str] = None
    ) -> JobTransition:
        """
        Moves a job to ``new_status`` and applies the provider counter and ledger
        side effects that status triggers. Returns the applied transition.
        """
        pass
